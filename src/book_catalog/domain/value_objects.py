"""
Domain value objects for Book Catalog.

Value objects are immutable objects that are defined by their attributes rather than identity.
Two books with the same title, author and price are interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Union

from ..exceptions import InvalidBookError

Price = Union[Decimal, int]


def _is_price(value: Any) -> bool:
    """Check that a value is an exact, finite number (bool is rejected despite being an int)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, int)


@dataclass(frozen=True, slots=True)
class Book:
    """
    Value object representing a single book record.

    Fields are stored verbatim: no normalization, no defaulting and no range
    checks. Only the shape of each field is validated.
    """

    title: str
    author: str
    price: Price

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.title, str):
            raise InvalidBookError(f"Book title must be str, got {type(self.title).__name__}")
        if not isinstance(self.author, str):
            raise InvalidBookError(f"Book author must be str, got {type(self.author).__name__}")
        if not _is_price(self.price):
            raise InvalidBookError(
                f"Book price must be a finite Decimal or an int, got {self.price!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "title": self.title,
            "author": self.author,
            "price": str(self.price),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"{self.title} by {self.author}"
