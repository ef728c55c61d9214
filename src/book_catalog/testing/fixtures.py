"""
Sample book fixtures.

This module provides realistic, randomized book data for tests and demos.
Titles, authors and prices are generated with Faker; a seed makes a run
reproducible.
"""

from decimal import Decimal
from typing import Iterator, List, Optional

from faker import Faker

from ..domain.entities import Catalog
from ..domain.value_objects import Book
from ..exceptions import ConfigurationError
from ..models.config import CENT, SampleConfig


class BookFactory:
    """
    Builds Book instances with Faker-generated titles, authors and prices.

    Prices are Decimal values with two decimal places inside
    ``[min_price, max_price]``.
    """

    def __init__(self, config: Optional[SampleConfig] = None):
        """Initialize the factory from a sample configuration."""
        self.config = config or SampleConfig()
        self.faker = Faker(self.config.locale)
        if self.config.seed is not None:
            self.faker.seed_instance(self.config.seed)

    def title(self) -> str:
        """Generate a book title."""
        return self.faker.catch_phrase().title()

    def author(self) -> str:
        """Generate an author name."""
        return self.faker.name()

    def price(self) -> Decimal:
        """Generate a price within the configured range."""
        low, high = self.config.cent_range()
        if low > high:
            raise ConfigurationError(
                f"Price range {self.config.min_price}..{self.config.max_price} contains no whole cent"
            )
        cents = self.faker.random_int(min=low, max=high)
        return (Decimal(cents) * CENT).quantize(CENT)

    def book(self, **overrides) -> Book:
        """Build one book; any of title, author or price can be fixed by keyword."""
        return Book(
            title=overrides.get("title", self.title()),
            author=overrides.get("author", self.author()),
            price=overrides.get("price", self.price()),
        )

    def books(self, count: Optional[int] = None) -> List[Book]:
        """Build ``count`` books (defaults to the configured count)."""
        return list(self.iter_books(count))

    def iter_books(self, count: Optional[int] = None) -> Iterator[Book]:
        """Lazily build ``count`` books."""
        total = self.config.count if count is None else count
        for _ in range(total):
            yield self.book()


def build_sample_catalog(config: Optional[SampleConfig] = None, name: str = "Sample Catalog") -> Catalog:
    """Create a catalog filled with generated books."""
    factory = BookFactory(config)
    return Catalog.from_books(factory.iter_books(), name=name)
