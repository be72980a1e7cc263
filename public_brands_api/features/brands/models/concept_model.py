"""Raw concept models.

These models are the single internal shape every backing store is translated
into. They carry bare UUIDs and unfiltered type labels; turning them into the
public representation is the transformer's job.
"""

from pydantic import Field, field_validator

from .base_model import ConceptBaseModel


class RawConcept(ConceptBaseModel):
    """A related concept (parent or child) as read from the backing store."""

    id: str = Field(default="", description="Bare UUID of the canonical concept")
    pref_label: str = Field(default="", description="Display name")
    types: list[str] = Field(
        default_factory=list,
        description="Unfiltered type labels, bare names or full type URIs",
    )
    authority: str | None = Field(
        default=None, description="Source authority the relationship came from"
    )

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        return v.strip()


class RelationshipSlice(ConceptBaseModel):
    """Relationships contributed by a single source representation."""

    authority: str | None = Field(
        default=None, description="Authority that supplied these relationships"
    )
    parents: list[RawConcept] = Field(default_factory=list)
    children: list[RawConcept] = Field(default_factory=list)


class RawBrandBundle(ConceptBaseModel):
    """A canonical concept together with its one-hop relationships.

    ``parents`` and ``children`` hold the relationships of the winning
    authority for each direction, with related nodes already mapped to their
    canonical ids. Their type labels are still unfiltered.
    """

    id: str = Field(..., description="Bare UUID of the canonical concept")
    pref_label: str = Field(default="", description="Display name")
    types: list[str] = Field(default_factory=list, description="Unfiltered labels")
    description_xml: str | None = Field(default=None)
    strapline: str | None = Field(default=None)
    image_url: str | None = Field(default=None)
    parents: list[RawConcept] = Field(default_factory=list)
    children: list[RawConcept] = Field(default_factory=list)


class Resolution(ConceptBaseModel):
    """Outcome of classifying a requested identifier.

    * canonical: ``found`` is True and ``canonical_id`` equals the request.
    * alias: ``found`` is False and ``canonical_id`` names the redirect target.
    * unknown: ``found`` is False and ``canonical_id`` is None.
    """

    canonical_id: str | None = None
    found: bool = False

    @property
    def is_alias(self) -> bool:
        return not self.found and self.canonical_id is not None


class BrandLookup(ConceptBaseModel):
    """Resolution plus, for canonical ids, the fetched bundle."""

    resolution: Resolution
    bundle: RawBrandBundle | None = None
