"""Two-stack integer sorting that records and prints the operations it performs."""

__version__ = "1.0.0"