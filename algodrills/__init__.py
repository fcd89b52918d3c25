"""Classic contest-programming exercises solved as small Python functions, with a small command line."""

__version__ = "0.1.0"