"""A hash-linked ledger of text blocks with validation, file storage and a console menu."""

__version__ = "0.1.0"