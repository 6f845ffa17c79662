"""Stack machine instructions, code sequences, literal tables and binary object files."""

__version__ = "0.1.0"