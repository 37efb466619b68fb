"""A simple train ticket sales system with a text menu, file storage and reports."""

__version__ = "1.0.0"
__all__ = ["menu", "storage", "ticket", "tokens", "train"]