"""Validate integers and print the stack operations that sort lists of two, three or five."""

__version__ = "0.1.0"
__all__ = ["cli", "sorting", "stack", "validation"]