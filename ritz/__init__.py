"""A tiny content-addressed version control system with a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]