"""Integer-tick limit order books with a dense window near the touch."""

__version__ = "0.1.0"