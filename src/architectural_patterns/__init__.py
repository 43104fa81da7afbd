"""Small, self-contained examples of object design patterns."""

__version__ = "0.1.0"
