"""PostgreSQL AGE implementation of the brand repository protocol.

Graph layout read by this repository:

* canonical concepts: ``(:Thing {prefUUID, prefLabel, types, descriptionXML,
  strapline, imageUrl})``
* source representations: ``(:Thing {uuid, prefLabel, types, authority})``
  linked ``-[:EQUIVALENT_TO]->`` to their canonical concept
* identifiers: ``(:UPPIdentifier {value})-[:IDENTIFIES]->(source)``
* hierarchy: ``(source)-[:HAS_PARENT]->(source)``

AGE vertices carry a single label, so the type hierarchy of a concept lives
in its ``types`` property.
"""

import json
import logging
import re
from typing import Any, cast

import asyncpg
from typing_extensions import override

from public_brands_api.features.brands.models import (
    BrandLookup,
    RawBrandBundle,
    RawConcept,
    RelationshipSlice,
    Resolution,
)
from public_brands_api.features.brands.repositories.protocols import BrandRepository
from public_brands_api.features.brands.services.concordance import (
    AuthorityPrecedence,
)
from public_brands_api.features.brands.usecases.errors import (
    BackingStoreError,
    DataIntegrityError,
)

logger = logging.getLogger(__name__)


class AgeRepository(BrandRepository):
    """PostgreSQL AGE implementation of the brand repository."""

    pool: asyncpg.Pool
    graph_name: str
    precedence: AuthorityPrecedence

    def __init__(
        self, pool: asyncpg.Pool, graph_name: str, precedence: AuthorityPrecedence
    ):
        """Initialize the repository with a connection pool, graph name and
        the authority precedence used to settle conflicting relationships."""
        self.pool = pool
        self.graph_name = graph_name
        self.precedence = precedence
        if not graph_name:
            raise ValueError("graph_name must be provided")

    @staticmethod
    def _escape_cypher_string(value: str) -> str:
        """Escape single quotes for use in Cypher string literals."""
        return value.replace("'", "\\'")

    @staticmethod
    def _clean_agtype_string(agtype_str: str) -> str:
        """Clean AGE agtype string by removing type annotations like ::vertex and ::edge."""
        return re.sub(r"::(vertex|edge|path)", "", agtype_str)

    async def _setup_age_connection(self, conn: asyncpg.Connection) -> None:
        """Setup AGE extension and search path for a connection."""
        _ = await conn.execute("LOAD 'age';")
        _ = await conn.execute("SET search_path = ag_catalog, '$user', public;")

    async def _execute_cypher(self, cypher_query: str) -> Any:
        """Execute a Cypher query returning a single ``result`` column.

        Args:
            cypher_query: The raw Cypher query string; it must return exactly
                one value aliased ``result``.

        Returns:
            The decoded agtype value of the first row, or None if no rows.

        Raises:
            BackingStoreError: If the query fails or its result is unreadable.
        """
        query = f"""
            SELECT * FROM cypher('{self.graph_name}', $${cypher_query}$$)
            as (result agtype);
        """

        try:
            async with self.pool.acquire() as conn:
                conn = cast(asyncpg.Connection, conn)

                async with conn.transaction():
                    await self._setup_age_connection(conn)
                    record = await conn.fetchrow(query)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error("Error executing cypher %s: %s", cypher_query, e)
            raise BackingStoreError("Error accessing brands datastore") from e

        if record is None:
            return None

        result_str = cast(str | None, record["result"])
        if result_str is None:
            return None
        try:
            return json.loads(self._clean_agtype_string(result_str))
        except json.JSONDecodeError as e:
            logger.error("Unreadable agtype result %r: %s", result_str, e)
            raise BackingStoreError("Error decoding brands datastore result") from e

    @override
    async def resolve(self, uuid: str) -> Resolution:
        """Classify an id, following at most one equivalence hop."""
        escaped = self._escape_cypher_string(uuid)

        canonical_count = await self._execute_cypher(
            f"""
            MATCH (t:Thing {{prefUUID: '{escaped}'}})
            RETURN count(t) AS result
            """
        )
        canonical_count = int(canonical_count or 0)
        if canonical_count > 1:
            logger.error("Multiple canonical brands found with uuid %s", uuid)
            raise DataIntegrityError(uuid, canonical_count)
        if canonical_count == 1:
            return Resolution(canonical_id=uuid, found=True)

        # Only a target that is itself canonical (has a prefUUID) counts;
        # nulls drop out of collect().
        targets = await self._execute_cypher(
            f"""
            MATCH (:UPPIdentifier {{value: '{escaped}'}})-[:IDENTIFIES]->(:Thing)
                  -[:EQUIVALENT_TO]->(c:Thing)
            RETURN collect(DISTINCT c.prefUUID) AS result
            """
        )
        canonical_ids = [t for t in cast(list[str], targets or []) if t and t != uuid]
        if len(canonical_ids) > 1:
            logger.error(
                "Source uuid %s is equivalent to several canonical brands: %s",
                uuid,
                canonical_ids,
            )
            raise DataIntegrityError(uuid, len(canonical_ids))
        if canonical_ids:
            return Resolution(canonical_id=canonical_ids[0], found=False)
        return Resolution()

    @override
    async def fetch(self, canonical_id: str) -> RawBrandBundle | None:
        """Read a canonical concept and the relationships of its sources."""
        escaped = self._escape_cypher_string(canonical_id)
        rows = await self._execute_cypher(
            f"""
            MATCH (t:Thing {{prefUUID: '{escaped}'}})
            OPTIONAL MATCH (t)<-[:EQUIVALENT_TO]-(s:Thing)
            OPTIONAL MATCH (s)-[:HAS_PARENT]->(:Thing)-[:EQUIVALENT_TO]->(p:Thing)
            OPTIONAL MATCH (s)<-[:HAS_PARENT]-(:Thing)-[:EQUIVALENT_TO]->(c:Thing)
            RETURN collect({{
                canonical: t,
                source: s.uuid,
                authority: s.authority,
                parent: p,
                child: c
            }}) AS result
            """
        )
        results_list = cast(list[dict[str, Any]], rows or [])
        if not results_list:
            return None

        canonical_vertex_ids = {item["canonical"]["id"] for item in results_list}
        if len(canonical_vertex_ids) > 1:
            logger.error("Multiple canonical brands found with uuid %s", canonical_id)
            raise DataIntegrityError(canonical_id, len(canonical_vertex_ids))

        canonical_props = cast(
            dict[str, Any], results_list[0]["canonical"]["properties"]
        )
        slices = self._group_by_source(results_list)

        return RawBrandBundle(
            id=canonical_props["prefUUID"],
            pref_label=canonical_props.get("prefLabel") or "",
            types=list(canonical_props.get("types") or []),
            description_xml=canonical_props.get("descriptionXML"),
            strapline=canonical_props.get("strapline"),
            image_url=canonical_props.get("imageUrl"),
            parents=self.precedence.select_parents(slices),
            children=self.precedence.select_children(slices),
        )

    @staticmethod
    def _related_concept(vertex: dict[str, Any], authority: str | None) -> RawConcept:
        props = cast(dict[str, Any], vertex["properties"])
        return RawConcept(
            id=props.get("prefUUID") or "",
            pref_label=props.get("prefLabel") or "",
            types=list(props.get("types") or []),
            authority=authority,
        )

    def _group_by_source(
        self, results_list: list[dict[str, Any]]
    ) -> list[RelationshipSlice]:
        """Collect the parents and children found through each source node.

        AGE gives no ordering guarantee for ``collect()``, so slices are
        ordered by source uuid and their relations by canonical id. This keeps
        the chosen parent stable across identical reads.
        """
        grouped: dict[
            str | None, tuple[str | None, list[RawConcept], list[RawConcept]]
        ] = {}
        for item in results_list:
            source = cast(str | None, item.get("source"))
            authority = cast(str | None, item.get("authority"))
            _, parents, children = grouped.setdefault(source, (authority, [], []))
            if item.get("parent"):
                parents.append(self._related_concept(item["parent"], authority))
            if item.get("child"):
                children.append(self._related_concept(item["child"], authority))

        return [
            RelationshipSlice(
                authority=authority,
                parents=sorted(parents, key=lambda c: c.id),
                children=sorted(children, key=lambda c: c.id),
            )
            for _, (authority, parents, children) in sorted(
                grouped.items(), key=lambda item: item[0] or ""
            )
        ]

    @override
    async def lookup(self, uuid: str) -> BrandLookup:
        resolution = await self.resolve(uuid)
        if not resolution.found:
            return BrandLookup(resolution=resolution)

        bundle = await self.fetch(uuid)
        if bundle is None:
            # Removed between the two queries.
            return BrandLookup(resolution=Resolution())
        return BrandLookup(resolution=resolution, bundle=bundle)

    @override
    async def check_connectivity(self) -> None:
        """Run a trivial query to prove the graph is reachable."""
        _ = await self._execute_cypher(
            """
            MATCH (n) RETURN id(n) AS result LIMIT 1
            """
        )
