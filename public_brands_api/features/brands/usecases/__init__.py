"""Use cases for the brands feature."""

from .errors import (
    BackingStoreError,
    BrandLookupError,
    DataIntegrityError,
    InvalidBrandIdError,
)
from .get_brand_usecase import GetBrandResult, GetBrandUseCaseImpl, validate_uuid

__all__ = [
    "GetBrandUseCaseImpl",
    "GetBrandResult",
    "validate_uuid",
    "BackingStoreError",
    "BrandLookupError",
    "DataIntegrityError",
    "InvalidBrandIdError",
]
