"""Building blocks for editing, searching, listing and summarising shell history."""

__version__ = "0.1.0"