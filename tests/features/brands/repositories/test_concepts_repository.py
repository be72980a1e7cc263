"""Tests for ConceptsRepository against a mocked concepts API."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from public_brands_api.db.concepts import ConceptsClient
from public_brands_api.features.brands.repositories import ConceptsRepository
from public_brands_api.features.brands.usecases import BackingStoreError
from tests.utils.brands import (
    ALIAS_UUID,
    BRAND_TYPE_URI,
    BRAND_UUID,
    CHILD_UUID,
    PARENT_UUID,
    related_concept_entry,
    things_url,
)

BASE_URL = "http://concepts.test"


def make_repository(
    handler: Callable[[httpx.Request], httpx.Response],
) -> ConceptsRepository:
    """Build a repository whose client talks to ``handler`` instead of the network."""
    client = ConceptsClient(base_url=BASE_URL)
    client._client = httpx.AsyncClient(  # pyright: ignore[reportPrivateUsage]
        transport=httpx.MockTransport(handler), base_url=BASE_URL
    )
    return ConceptsRepository(client)


def respond_with(
    status_code: int, payload: Any = None, content: bytes | None = None
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=payload)

    return handler


class TestConceptsRepository:
    """Test cases for ConceptsRepository."""

    @pytest.mark.asyncio
    async def test_lookup_canonical_brand(self, complete_brand_concept: dict[str, Any]):
        repository = make_repository(respond_with(200, complete_brand_concept))

        lookup = await repository.lookup(BRAND_UUID)

        assert lookup.resolution.found is True
        assert lookup.resolution.canonical_id == BRAND_UUID
        bundle = lookup.bundle
        assert bundle is not None
        assert bundle.id == BRAND_UUID
        assert bundle.types == [BRAND_TYPE_URI]
        assert bundle.description_xml == "One brand to rule them all"
        assert bundle.strapline == "Something"
        assert bundle.image_url == "www.imgur.com"
        assert [p.id for p in bundle.parents] == [PARENT_UUID]
        assert [c.pref_label for c in bundle.children] == ["Little Lex", "Baby Lex"]

    @pytest.mark.asyncio
    async def test_request_shape(self, complete_brand_concept: dict[str, Any]):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=complete_brand_concept)

        _ = await make_repository(handler).lookup(BRAND_UUID)

        assert len(requests) == 1
        assert requests[0].url.path == f"/concepts/{BRAND_UUID}"
        assert requests[0].url.params.get_list("showRelationship") == [
            "broader",
            "narrower",
        ]

    @pytest.mark.asyncio
    async def test_description_xml_preferred_over_description(
        self, complete_brand_concept: dict[str, Any]
    ):
        complete_brand_concept["descriptionXML"] = "<p>Rich</p>"
        repository = make_repository(respond_with(200, complete_brand_concept))

        bundle = await repository.fetch(BRAND_UUID)

        assert bundle is not None
        assert bundle.description_xml == "<p>Rich</p>"

    @pytest.mark.asyncio
    async def test_alias_resolves_to_returned_id(
        self, complete_brand_concept: dict[str, Any]
    ):
        repository = make_repository(respond_with(200, complete_brand_concept))

        resolution = await repository.resolve(ALIAS_UUID)

        assert resolution.is_alias
        assert resolution.canonical_id == BRAND_UUID
        assert await repository.fetch(ALIAS_UUID) is None

    @pytest.mark.asyncio
    async def test_not_found(self):
        repository = make_repository(respond_with(404, {"message": "not found"}))

        lookup = await repository.lookup(BRAND_UUID)

        assert lookup.resolution.found is False
        assert lookup.resolution.canonical_id is None
        assert lookup.bundle is None

    @pytest.mark.asyncio
    async def test_related_entries_are_unwrapped_and_deduplicated(self):
        document = {
            "id": things_url(BRAND_UUID),
            "prefLabel": "Lex",
            "type": BRAND_TYPE_URI,
            "narrowerConcepts": [
                related_concept_entry(CHILD_UUID, "Little Lex", BRAND_TYPE_URI),
                related_concept_entry(CHILD_UUID, "Little Lex", BRAND_TYPE_URI),
                {"concept": {}},
                {},
            ],
        }
        repository = make_repository(respond_with(200, document))

        bundle = await repository.fetch(BRAND_UUID)

        assert bundle is not None
        assert bundle.parents == []
        assert [c.id for c in bundle.children] == [CHILD_UUID]
        assert bundle.children[0].types == [BRAND_TYPE_URI]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [500, 503, 400])
    async def test_unexpected_status(self, status_code: int):
        repository = make_repository(respond_with(status_code, {"message": "boom"}))

        with pytest.raises(BackingStoreError):
            _ = await repository.lookup(BRAND_UUID)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        repository = make_repository(respond_with(200, content=b"{not json"))

        with pytest.raises(BackingStoreError, match="Invalid json"):
            _ = await repository.lookup(BRAND_UUID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [[], {"prefLabel": "No id"}])
    async def test_document_without_id(self, payload: Any):
        repository = make_repository(respond_with(200, payload))

        with pytest.raises(BackingStoreError):
            _ = await repository.lookup(BRAND_UUID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"id": things_url(BRAND_UUID), "broaderConcepts": ["not-an-object"]},
            {"id": things_url(BRAND_UUID), "narrowerConcepts": {"concept": {}}},
            {"id": things_url(BRAND_UUID), "broaderConcepts": [{"concept": "x"}]},
            {"id": 42, "type": BRAND_TYPE_URI},
            {"id": ""},
        ],
    )
    async def test_malformed_document(self, payload: Any):
        repository = make_repository(respond_with(200, payload))

        with pytest.raises(BackingStoreError, match="Malformed concept"):
            _ = await repository.lookup(BRAND_UUID)

    @pytest.mark.asyncio
    async def test_null_relationship_lists(self):
        document = {
            "id": things_url(BRAND_UUID),
            "type": BRAND_TYPE_URI,
            "broaderConcepts": None,
            "narrowerConcepts": None,
        }
        repository = make_repository(respond_with(200, document))

        bundle = await repository.fetch(BRAND_UUID)

        assert bundle is not None
        assert bundle.parents == []
        assert bundle.children == []

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        repository = make_repository(handler)

        with pytest.raises(BackingStoreError):
            _ = await repository.lookup(BRAND_UUID)

    @pytest.mark.asyncio
    async def test_check_connectivity(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/__gtg"
            return httpx.Response(200, text="OK")

        await make_repository(handler).check_connectivity()

    @pytest.mark.asyncio
    async def test_check_connectivity_not_ready(self):
        repository = make_repository(respond_with(503, {"message": "not ready"}))

        with pytest.raises(BackingStoreError, match="not ready"):
            await repository.check_connectivity()

    @pytest.mark.asyncio
    async def test_check_connectivity_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(BackingStoreError, match="unreachable"):
            await make_repository(handler).check_connectivity()

