"""Repository protocols for the brands feature."""

from .brand_repository import BrandRepository

__all__ = ["BrandRepository"]
