"""Module for the upstream concepts API client."""

from .client import ConceptsClient
from .connection import close_concepts_client, get_concepts_client

__all__ = [
    "ConceptsClient",
    "get_concepts_client",
    "close_concepts_client",
]
