"""Custom exceptions for book catalog."""


class BookCatalogError(Exception):
    """Base exception for book catalog errors."""
    pass


class InvalidBookError(BookCatalogError, TypeError):
    """Raised when a book is built from, or a catalog is given, values of the wrong type."""
    pass


class ConfigurationError(BookCatalogError):
    """Raised when there's an error in configuration."""
    pass
