"""Character, byte-buffer, string, output and singly linked list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "transform", "linkedlist"]