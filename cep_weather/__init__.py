"""Current temperature for a Brazilian postal code (CEP)."""

__version__ = "0.1.0"
