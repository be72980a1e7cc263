"""Concepts API client implementation."""

import httpx

RELATIONSHIPS: tuple[str, ...] = ("broader", "narrower")


class ConceptsClient:
    """Connection manager for the upstream concepts API.

    A single `httpx.AsyncClient` is shared by all requests; connection pooling
    and keep-alive are left to httpx.
    """

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url: str = base_url.rstrip("/")
        self.timeout: float = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None and not self._client.is_closed

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)

    async def disconnect(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_concept(self, uuid: str) -> httpx.Response:
        """Fetch a concept together with its broader and narrower concepts.

        The response is returned as-is; interpreting status codes is left to
        the caller.
        """
        if not self._client:
            raise RuntimeError("Not connected to the concepts API")

        params = [("showRelationship", relationship) for relationship in RELATIONSHIPS]
        return await self._client.get(f"/concepts/{uuid}", params=params)

    async def is_server_ready(self) -> bool:
        """Check the concepts API good-to-go endpoint."""
        if not self._client:
            raise RuntimeError("Not connected to the concepts API")

        response = await self._client.get("/__gtg")
        return response.status_code == 200
