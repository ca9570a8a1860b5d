from typing import Final

# Settings file, relative to the working directory
SETTINGS_FILE: Final = "settings.ron"

# Directory holding one ledger per boat
DATA_DIR: Final = "data"
LEDGER_SUFFIX: Final = ".csv"

# Environment overrides for the two paths above
SETTINGS_ENV_VAR: Final = "BOATLOG_SETTINGS"
DATA_DIR_ENV_VAR: Final = "BOATLOG_DATA_DIR"

# Range of a ledger amount (signed 8-bit)
AMOUNT_MIN: Final = -128
AMOUNT_MAX: Final = 127
DEFAULT_AMOUNT: Final = 1
