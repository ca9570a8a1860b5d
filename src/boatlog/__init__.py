"""Log consumption of boat inventory into per-boat CSV ledgers."""

__version__ = "0.1.0"
