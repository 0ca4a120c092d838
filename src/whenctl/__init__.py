"""whenctl — natural-language date expression resolver."""

__version__ = "0.1.0"
