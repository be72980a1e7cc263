"""Upstream concepts API document models.

Only the fields the brands API reads are declared; anything else the
upstream sends is ignored. Validation failures mean the upstream answered
with something that is not a concept.
"""

from pydantic import Field

from .base_model import ConceptBaseModel


class RelatedConceptDocument(ConceptBaseModel):
    """The ``concept`` object of a broader/narrower entry."""

    id: str = Field(default="", description="Things URI of the related concept")
    api_url: str | None = Field(default=None, alias="apiUrl")
    pref_label: str | None = Field(default=None, alias="prefLabel")
    type: str | None = Field(default=None, description="Type URI")


class RelatedConceptEntry(ConceptBaseModel):
    """One ``broaderConcepts``/``narrowerConcepts`` item."""

    concept: RelatedConceptDocument | None = None


class ConceptDocument(ConceptBaseModel):
    """A concept as returned by ``GET /concepts/{uuid}``."""

    id: str = Field(..., min_length=1, description="Things URI of the concept")
    api_url: str | None = Field(default=None, alias="apiUrl")
    pref_label: str | None = Field(default=None, alias="prefLabel")
    type: str | None = Field(default=None, description="Type URI")
    description_xml: str | None = Field(default=None, alias="descriptionXML")
    description: str | None = None
    strapline: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    broader_concepts: list[RelatedConceptEntry] | None = Field(
        default=None, alias="broaderConcepts"
    )
    narrower_concepts: list[RelatedConceptEntry] | None = Field(
        default=None, alias="narrowerConcepts"
    )
