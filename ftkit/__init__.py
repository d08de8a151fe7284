"""Helpers for characters, strings, byte buffers, linked lists, formatted output and line reading."""

__version__ = "0.1.0"

__all__ = [
    "chartype",
    "convert",
    "memory",
    "strings",
    "textops",
    "linkedlist",
    "output",
    "reader",
]