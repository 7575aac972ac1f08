"""Check quiz questions against the compiler, build the quiz website data, and serve the site."""

__version__ = "0.1.0"
__all__ = ["__version__"]