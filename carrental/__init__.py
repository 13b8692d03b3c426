"""Car rental ledger — cars, customers and non-overlapping rents."""

__version__ = "0.1.0"
