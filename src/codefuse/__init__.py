"""Bundle source files from a directory tree into one text file."""

__version__ = "0.1.0"
