"""Count blank, comment and code lines in source trees, per language or per file."""

__version__ = "0.1.0"