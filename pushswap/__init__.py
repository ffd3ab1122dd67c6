"""Two-stack integer sorting that reports the operations it performs, with small string, number and list helpers."""

__version__ = "1.0.0"