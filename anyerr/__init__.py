"""A flexible error type with context, downcasting and readable cause reports."""

__version__ = "1.0.0"
__all__ = ["fmt", "wrapper", "error", "macros"]