"""Book Catalog

An in-memory catalog of book records with aggregate queries.
"""

__version__ = "0.1.0"

from .domain import Book, Catalog, Price
from .exceptions import BookCatalogError, ConfigurationError, InvalidBookError

__all__ = [
    # Domain
    "Book",
    "Catalog",
    "Price",
    # Errors
    "BookCatalogError",
    "ConfigurationError",
    "InvalidBookError",
]
