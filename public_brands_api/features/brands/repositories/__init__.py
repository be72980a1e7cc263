"""Brand repositories package."""

from .age_repository import AgeRepository
from .concepts_repository import ConceptsRepository
from .protocols import BrandRepository

__all__ = [
    # Graph implementation
    "AgeRepository",
    # Concepts API implementation
    "ConceptsRepository",
    # Protocol
    "BrandRepository",
]
