from enum import Enum


class InventoryItem(str, Enum):
    """Kinds of stock that can be logged against a boat.

    The member value is what the CLI accepts; ``ledger_name`` is what ends
    up in the CSV and must stay stable once ledgers exist.
    """

    MILK = "milk"
    COFFEE = "coffee"
    MUGS = "mugs"
    SUGAR = "sugar"
    STICKS = "sticks"
    THERMOS = "thermos"

    @property
    def ledger_name(self) -> str:
        """Name written to the ledger (e.g. ``Milk``)."""
        return self.value.capitalize()
