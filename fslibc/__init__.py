"""C-library style memory, string, search, formatting and stream routines."""

__version__ = "0.1.0"
__all__ = ["console", "memory", "printf", "search", "stream", "strings"]