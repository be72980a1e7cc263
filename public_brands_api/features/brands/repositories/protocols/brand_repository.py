"""Protocol definition for brand repository operations."""

from typing import Protocol

from public_brands_api.features.brands.models import (
    BrandLookup,
    RawBrandBundle,
    Resolution,
)


class BrandRepository(Protocol):
    """Protocol for reading brands from a backing store.

    Implementations translate whatever their store returns into the raw
    models and raise `BackingStoreError` for any access failure. Not-found is
    always a return value, never an exception.
    """

    async def resolve(self, uuid: str) -> Resolution:
        """Classify an id as canonical, alias or unknown.

        Args:
            uuid: A syntactically valid UUID

        Returns:
            The resolution. Aliases carry the canonical id to redirect to.

        Raises:
            BackingStoreError: If the store cannot be read
            DataIntegrityError: If the id matches more than one record
        """
        ...

    async def fetch(self, canonical_id: str) -> RawBrandBundle | None:
        """Read a canonical concept and its one-hop relationships.

        Returns:
            The bundle, or None if no canonical concept has this id.
        """
        ...

    async def lookup(self, uuid: str) -> BrandLookup:
        """Resolve an id and, when canonical, fetch its bundle.

        Stores that answer both questions in one round trip override this to
        avoid a second call.
        """
        ...

    async def check_connectivity(self) -> None:
        """Raise `BackingStoreError` if the store is unreachable."""
        ...
