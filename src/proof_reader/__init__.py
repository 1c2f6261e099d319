"""proof-reader: content and accessibility checks for generated websites."""

__version__ = "0.1.0"
