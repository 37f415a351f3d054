"""A command-line typing test that records accuracy and words per minute."""

__version__ = "0.1.0"