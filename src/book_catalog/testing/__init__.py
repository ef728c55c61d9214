"""
Testing utilities for book catalog.

Randomized, realistic book fixtures for tests and the demo CLI.
"""

from .fixtures import BookFactory, build_sample_catalog

__all__ = ["BookFactory", "build_sample_catalog"]
