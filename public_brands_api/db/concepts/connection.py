"""Concepts API connection management."""

from public_brands_api.core.settings import get_settings

from .client import ConceptsClient

_concepts_client: ConceptsClient | None = None


async def get_concepts_client() -> ConceptsClient:
    """Get the concepts API client as a dependency."""
    global _concepts_client
    if _concepts_client is None:
        settings = get_settings()
        _concepts_client = ConceptsClient(
            base_url=settings.concepts_api_url,
            timeout=settings.concepts_api_timeout,
        )
        await _concepts_client.connect()
    elif not _concepts_client.is_connected:
        # Reconnect if client was closed
        await _concepts_client.connect()

    return _concepts_client


async def close_concepts_client() -> None:
    """Close the concepts API client."""
    global _concepts_client
    if _concepts_client:
        await _concepts_client.disconnect()
        _concepts_client = None
