"""Transformation of raw brand bundles into the public representation."""

import logging

from public_brands_api.features.brands.dtos import BrandDto, ThingDto
from public_brands_api.features.brands.models import RawBrandBundle, RawConcept
from public_brands_api.features.brands.services.concordance import dedupe
from public_brands_api.features.brands.services.type_hierarchy import (
    TypeHierarchyError,
    api_url,
    id_url,
    is_a,
    known_types,
    most_specific_type,
    type_uris,
)

BRAND_TYPE = "Brand"

logger = logging.getLogger(__name__)


def is_brand(concept: RawConcept) -> bool:
    """True if the concept's labels reduce to a brand type."""
    try:
        return is_a(most_specific_type(concept.types), BRAND_TYPE)
    except TypeHierarchyError:
        return False


class BrandTransformer:
    """Shapes raw bundles into `BrandDto`s.

    The transformer holds no state beyond the environment name used for API
    URLs, so the same bundle always yields the same document.
    """

    def __init__(self, env: str):
        self.env: str = env

    def transform(self, bundle: RawBrandBundle) -> BrandDto | None:
        """Build the public brand document.

        Returns:
            The brand, or None if the canonical concept is not a brand.

        Raises:
            TypeHierarchyError: If the concept's own labels are contradictory.
        """
        if not known_types(bundle.types):
            logger.debug("Concept %s has no known types", bundle.id)
            return None
        direct_type = most_specific_type(bundle.types)
        if not is_a(direct_type, BRAND_TYPE):
            logger.debug("Concept %s is a %s, not a brand", bundle.id, direct_type)
            return None

        uris = type_uris(direct_type)
        parents = self._related_brands(bundle.parents)
        children = self._related_brands(bundle.children)

        return BrandDto(
            id=id_url(bundle.id),
            api_url=api_url(bundle.id, direct_type, self.env),
            types=uris,
            direct_type=uris[-1],
            pref_label=bundle.pref_label,
            description_xml=bundle.description_xml or None,
            strapline=bundle.strapline or None,
            image_url=bundle.image_url or None,
            parent_brand=parents[0] if parents else None,
            child_brands=children or None,
        )

    def _thing(self, concept: RawConcept, direct_type: str) -> ThingDto:
        uris = type_uris(direct_type)
        return ThingDto(
            id=id_url(concept.id),
            api_url=api_url(concept.id, direct_type, self.env),
            types=uris,
            direct_type=uris[-1],
            pref_label=concept.pref_label,
        )

    def _related_brands(self, concepts: list[RawConcept]) -> list[ThingDto]:
        """Transform related concepts, keeping unique brands only."""
        things: list[ThingDto] = []
        for concept in dedupe([c for c in concepts if c.id]):
            try:
                direct_type = most_specific_type(concept.types)
            except TypeHierarchyError as e:
                logger.warning("Skipping related concept %s: %s", concept.id, e)
                continue
            if is_a(direct_type, BRAND_TYPE):
                things.append(self._thing(concept, direct_type))
        return things
