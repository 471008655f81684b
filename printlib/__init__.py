"""Write text to streams and files, and append words to a log file."""

__version__ = "0.1.0"
__all__ = ["printer", "demo", "examples"]