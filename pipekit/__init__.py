"""Two-command pipelines between files, with character, number, buffer, string, list and output helpers."""

__version__ = "0.1.0"
__all__ = ["ctype", "numbers", "memory", "text", "linkedlist", "output", "pipeline"]