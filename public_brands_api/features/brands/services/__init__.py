"""Services for the brands feature."""

from .brand_transformer import BrandTransformer, is_brand
from .concordance import AuthorityPrecedence, dedupe
from .type_hierarchy import TypeHierarchyError

__all__ = [
    "AuthorityPrecedence",
    "BrandTransformer",
    "TypeHierarchyError",
    "dedupe",
    "is_brand",
]
