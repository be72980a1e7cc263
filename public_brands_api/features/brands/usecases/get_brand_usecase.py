"""Use case for retrieving a brand by UUID.

This module ties resolution, fetching and transformation together: an id is
first classified as canonical, alias or unknown, and only canonical ids are
fetched and shaped into the public brand document.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel

from public_brands_api.features.brands.dtos import BrandDto
from public_brands_api.features.brands.models import RawBrandBundle, Resolution
from public_brands_api.features.brands.repositories.protocols import BrandRepository
from public_brands_api.features.brands.services.brand_transformer import (
    BrandTransformer,
)
from public_brands_api.features.brands.usecases.errors import InvalidBrandIdError

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

logger = logging.getLogger(__name__)


class GetBrandResult(BaseModel):
    """Outcome of a brand request.

    ``brand`` is set only when ``found``; ``canonical_id`` differs from the
    requested id only for aliases.
    """

    brand: BrandDto | None = None
    canonical_id: str | None = None
    found: bool = False


def validate_uuid(uuid: str) -> str:
    """Return ``uuid`` unchanged if it is a well-formed UUID.

    Raises:
        InvalidBrandIdError: If it is not.
    """
    if not UUID_PATTERN.match(uuid):
        raise InvalidBrandIdError(uuid)
    return uuid


class GetBrandUseCaseImpl:
    """Implementation of the get brand use case."""

    def __init__(self, repository: BrandRepository, transformer: BrandTransformer):
        """Initialize the use case with dependencies.

        Args:
            repository: Backing store the brand is read from
            transformer: Shapes raw bundles into public documents
        """
        self.repository: BrandRepository = repository
        self.transformer: BrandTransformer = transformer

    async def resolve(self, uuid: str) -> Resolution:
        """Classify an id as canonical, alias or unknown."""
        return await self.repository.resolve(validate_uuid(uuid))

    async def fetch_and_transform(self, canonical_id: str) -> BrandDto | None:
        """Fetch a canonical brand and shape it.

        Returns:
            The brand, or None if the id is unknown or not a brand.
        """
        bundle = await self.repository.fetch(validate_uuid(canonical_id))
        return self._transform(bundle)

    async def get_brand(self, uuid: str) -> GetBrandResult:
        """Retrieve a brand, or the canonical id to redirect to.

        Args:
            uuid: The requested brand UUID

        Returns:
            GetBrandResult. ``found`` with ``brand`` set for canonical brands;
            not ``found`` with ``canonical_id`` set for aliases; neither for
            unknown ids and concepts that are not brands.

        Raises:
            InvalidBrandIdError: If ``uuid`` is malformed; the backing store is
                not consulted.
            BrandLookupError: If the backing store fails or holds
                contradictory records.
            TypeHierarchyError: If the concept's type labels are contradictory.
        """
        _ = validate_uuid(uuid)
        lookup = await self.repository.lookup(uuid)
        resolution = lookup.resolution

        if resolution.is_alias:
            logger.debug("uuid %s is an alias of %s", uuid, resolution.canonical_id)
            return GetBrandResult(canonical_id=resolution.canonical_id)
        if not resolution.found:
            return GetBrandResult()

        brand = self._transform(lookup.bundle)
        if brand is None:
            return GetBrandResult()
        return GetBrandResult(brand=brand, canonical_id=uuid, found=True)

    def _transform(self, bundle: RawBrandBundle | None) -> BrandDto | None:
        if bundle is None:
            return None
        return self.transformer.transform(bundle)
