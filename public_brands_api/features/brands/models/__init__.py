"""Raw concept models for the brands feature."""

from .base_model import ConceptBaseModel
from .concept_document import (
    ConceptDocument,
    RelatedConceptDocument,
    RelatedConceptEntry,
)
from .concept_model import (
    BrandLookup,
    RawBrandBundle,
    RawConcept,
    RelationshipSlice,
    Resolution,
)

__all__ = [
    "ConceptBaseModel",
    # Upstream concepts API documents
    "ConceptDocument",
    "RelatedConceptDocument",
    "RelatedConceptEntry",
    # Backing-store neutral records
    "BrandLookup",
    "RawBrandBundle",
    "RawConcept",
    "RelationshipSlice",
    "Resolution",
]
