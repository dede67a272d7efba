"""Gold Sky: a basket catching game built on pygame."""

__version__ = "1.0.0"
