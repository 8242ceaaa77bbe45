"""Classic algorithms, data structures and text patterns in plain Python."""

__version__ = "0.1.0"