"""Use case protocols for the brands feature."""

from .get_brand_use_case import GetBrandUseCase

__all__ = ["GetBrandUseCase"]
