"""Character, number, buffer, string, linked-list, formatted-output and line-reading utilities."""

__version__ = "0.1.0"
__all__ = [
    "charclass",
    "convert",
    "memory",
    "text",
    "transform",
    "linkedlist",
    "output",
    "printf",
    "linereader",
]