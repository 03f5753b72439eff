"""Terminal reader for a small library of books and psalms."""

__version__ = "0.1.0"
