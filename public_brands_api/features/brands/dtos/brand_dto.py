"""Public brand DTOs.

This module defines the Data Transfer Objects rendered by the brands API.
Optional fields left as None are omitted when the DTO is serialized with
``exclude_none=True``.
"""

from pydantic import BaseModel, ConfigDict, Field


class ThingDto(BaseModel):
    """DTO for a concept as exposed publicly."""

    model_config = ConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        populate_by_name=True,
    )

    id: str = Field(..., description="Fully-qualified things URI")
    api_url: str = Field(
        ..., alias="apiUrl", description="URL of this concept's own API resource"
    )
    types: list[str] = Field(
        ..., description="Type URIs ordered from broadest to most specific"
    )
    direct_type: str = Field(
        ..., alias="directType", description="The most specific type URI"
    )
    pref_label: str = Field(..., alias="prefLabel", description="Display name")


class BrandDto(ThingDto):
    """DTO for a brand and its immediate parent and children."""

    description_xml: str | None = Field(
        default=None, alias="descriptionXML", description="Rich-text description"
    )
    strapline: str | None = Field(default=None, description="Brand strapline")
    image_url: str | None = Field(
        default=None, alias="imageUrl", description="Brand image location"
    )
    parent_brand: ThingDto | None = Field(
        default=None, alias="parentBrand", description="Preferred parent brand"
    )
    child_brands: list[ThingDto] | None = Field(
        default=None, alias="childBrands", description="Immediate child brands"
    )

    def to_json(self) -> str:
        """Render the public JSON document, omitting absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
