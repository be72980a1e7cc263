"""Concepts API implementation of the brand repository protocol.

The concepts API returns concorded concepts, so resolving and fetching a
brand take one call: the returned concept carries its canonical id, and a
mismatch with the requested id means the request named an alias.
"""

import json
import logging

import httpx
from pydantic import ValidationError
from typing_extensions import override

from public_brands_api.db.concepts import ConceptsClient
from public_brands_api.features.brands.models import (
    BrandLookup,
    ConceptDocument,
    RawBrandBundle,
    RawConcept,
    RelatedConceptEntry,
    Resolution,
)
from public_brands_api.features.brands.repositories.protocols import BrandRepository
from public_brands_api.features.brands.services.concordance import dedupe
from public_brands_api.features.brands.services.type_hierarchy import strip_id_url
from public_brands_api.features.brands.usecases.errors import BackingStoreError

logger = logging.getLogger(__name__)


class ConceptsRepository(BrandRepository):
    """Reads brands from the upstream concepts API."""

    def __init__(self, client: ConceptsClient):
        self.client: ConceptsClient = client

    async def _get_concept(self, uuid: str) -> ConceptDocument | None:
        """Fetch the concept document, or None if the API has no such id.

        Raises:
            BackingStoreError: If the request fails, the status is unexpected
                or the body is not a concept document.
        """
        try:
            response = await self.client.get_concept(uuid)
        except httpx.HTTPError as e:
            logger.error("Request to concepts API for uuid %s failed: %s", uuid, e)
            raise BackingStoreError("Error accessing concepts API") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if response.status_code != httpx.codes.OK:
            logger.error(
                "Concepts API returned status %d for uuid %s",
                response.status_code,
                uuid,
            )
            raise BackingStoreError(
                f"Concepts API returned status {response.status_code}"
            )

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Concepts API returned invalid json for uuid %s: %s", uuid, e)
            raise BackingStoreError("Invalid json from concepts API") from e
        try:
            return ConceptDocument.model_validate(payload)
        except ValidationError as e:
            logger.error("Malformed concept from concepts API for %s: %s", uuid, e)
            raise BackingStoreError("Malformed concept from concepts API") from e

    @staticmethod
    def _related(entries: list[RelatedConceptEntry] | None) -> list[RawConcept]:
        """Unwrap ``{"concept": {...}}`` relationship entries."""
        related: list[RawConcept] = []
        for entry in entries or []:
            concept = entry.concept
            if concept is None or not concept.id:
                continue
            related.append(
                RawConcept(
                    id=strip_id_url(concept.id),
                    pref_label=concept.pref_label or "",
                    types=[concept.type] if concept.type else [],
                )
            )
        return dedupe(related)

    def _to_bundle(self, document: ConceptDocument) -> RawBrandBundle:
        return RawBrandBundle(
            id=strip_id_url(document.id),
            pref_label=document.pref_label or "",
            types=[document.type] if document.type else [],
            description_xml=document.description_xml or document.description,
            strapline=document.strapline,
            image_url=document.image_url,
            parents=self._related(document.broader_concepts),
            children=self._related(document.narrower_concepts),
        )

    @override
    async def lookup(self, uuid: str) -> BrandLookup:
        document = await self._get_concept(uuid)
        if document is None:
            return BrandLookup(resolution=Resolution())

        bundle = self._to_bundle(document)
        if bundle.id != uuid:
            return BrandLookup(resolution=Resolution(canonical_id=bundle.id))
        return BrandLookup(
            resolution=Resolution(canonical_id=uuid, found=True), bundle=bundle
        )

    @override
    async def resolve(self, uuid: str) -> Resolution:
        return (await self.lookup(uuid)).resolution

    @override
    async def fetch(self, canonical_id: str) -> RawBrandBundle | None:
        return (await self.lookup(canonical_id)).bundle

    @override
    async def check_connectivity(self) -> None:
        try:
            ready = await self.client.is_server_ready()
        except httpx.HTTPError as e:
            raise BackingStoreError("Concepts API is unreachable") from e
        if not ready:
            raise BackingStoreError("Concepts API is not ready")
