"""Book Catalog Entities.

This module defines the Catalog aggregate: an ordered collection of
:class:`~book_catalog.domain.value_objects.Book` records with read-only
aggregate queries.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import InvalidBookError
from .value_objects import Book, Price

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    """
    Represents a book catalog.

    Books are kept in insertion order and duplicates are allowed. The only
    mutation is appending through :meth:`add`; every query is a pure function
    of the current entries.
    """

    # Catalog identity
    name: str = "Catalog"

    # Catalog contents
    _books: List[Book] = field(default_factory=list, init=False, repr=False)

    # Metadata
    created_at: datetime = field(default_factory=datetime.now, compare=False)
    last_updated: Optional[datetime] = field(default=None, compare=False)

    @classmethod
    def from_books(cls, books: Iterable[Book], name: str = "Catalog") -> Catalog:
        """Create a catalog holding the given books in iteration order."""
        catalog = cls(name=name)
        catalog.add_many(books)
        return catalog

    @property
    def books(self) -> Tuple[Book, ...]:
        """Get a snapshot of the entries in insertion order."""
        return tuple(self._books)

    @property
    def is_empty(self) -> bool:
        """Check if the catalog holds no books."""
        return not self._books

    def add(self, book: Book) -> None:
        """Append a book to the end of the catalog."""
        if not isinstance(book, Book):
            raise InvalidBookError(f"Catalog accepts Book instances, got {type(book).__name__}")
        self._books.append(book)
        self.last_updated = datetime.now()
        logger.debug("Added %r to %s (%d books)", book, self.name, len(self._books))

    def add_many(self, books: Iterable[Book]) -> None:
        """Append several books, keeping their iteration order."""
        for book in books:
            self.add(book)

    def total_price(self) -> Price:
        """Get the sum of all prices, 0 when the catalog is empty."""
        return sum((book.price for book in self._books), 0)

    def titles(self) -> List[str]:
        """Get the title of every entry, in entry order."""
        return [book.title for book in self._books]

    def find_by_author(self, author: str) -> List[Book]:
        """Get the books whose author matches exactly, in entry order."""
        return [book for book in self._books if book.author == author]

    def cheapest(self) -> List[Book]:
        """Get every book priced at the catalog minimum (all ties), in entry order."""
        if not self._books:
            return []
        lowest = min(book.price for book in self._books)
        return [book for book in self._books if book.price == lowest]

    def get_statistics(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        author_counts = Counter(book.author for book in self._books)
        cheapest = self.cheapest()

        return {
            "total_books": len(self._books),
            "total_price": self.total_price(),
            "unique_authors": len(author_counts),
            "cheapest_price": cheapest[0].price if cheapest else None,
            "top_authors": author_counts.most_common(10),
        }

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(tuple(self._books))

    def __contains__(self, book: object) -> bool:
        return book in self._books
