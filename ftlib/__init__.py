"""Character, memory, string, linked-list, output and line-reading utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "linked", "output", "lines"]