"""DTOs for the brands feature."""

from .brand_dto import BrandDto, ThingDto

__all__ = ["BrandDto", "ThingDto"]
