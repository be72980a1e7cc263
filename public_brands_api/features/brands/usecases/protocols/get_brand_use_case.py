"""Protocol for the get brand use case."""

from typing import Protocol

from public_brands_api.features.brands.dtos import BrandDto
from public_brands_api.features.brands.models import Resolution
from public_brands_api.features.brands.usecases.get_brand_usecase import (
    GetBrandResult,
)


class GetBrandUseCase(Protocol):
    """Protocol for use cases that retrieve brands.

    Implementations may read from different backing stores; callers only rely
    on the resolution semantics.
    """

    async def resolve(self, uuid: str) -> Resolution:
        """Classify an id as canonical, alias or unknown."""
        ...

    async def fetch_and_transform(self, canonical_id: str) -> BrandDto | None:
        """Fetch and shape a canonical brand."""
        ...

    async def get_brand(self, uuid: str) -> GetBrandResult:
        """Retrieve a brand, or the canonical id to redirect to.

        Args:
            uuid: The requested brand UUID

        Returns:
            GetBrandResult with the brand, a redirect target, or neither
        """
        ...
