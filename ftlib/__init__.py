"""Character, byte-buffer, string, linked-list, descriptor output and line-reading utilities."""

__version__ = "0.1.0"
__all__ = ["ctype", "memory", "strfuncs", "transform", "output", "linkedlist", "nextline"]