"""
Domain Layer - Book Catalog

Value objects describe a single book; the Catalog entity is the ordered
collection those books live in and answers the aggregate queries.
"""

from .value_objects import Book, Price
from .entities import Catalog

__all__ = [
    "Book",
    "Price",
    "Catalog",
]
