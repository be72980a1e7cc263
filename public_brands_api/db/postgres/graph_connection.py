"""PostgreSQL connection management for graph reads.

One asyncpg pool is shared by every request. Connections are tagged with the
application name so brand reads can be told apart in `pg_stat_activity`.
"""

import logging

import asyncpg

from public_brands_api.core.settings import get_settings

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


async def get_graph_db_pool() -> asyncpg.Pool:
    """Get the graph connection pool as a dependency, creating it on first use."""
    global _pool
    if _pool is None:
        settings = get_settings()
        _pool = await asyncpg.create_pool(
            user=settings.postgres_user,
            password=settings.postgres_password,
            host=settings.postgres_host,
            port=settings.postgres_port,
            database=settings.postgres_db,
            min_size=settings.postgres_pool_min_size,
            max_size=settings.postgres_pool_max_size,
            command_timeout=settings.postgres_command_timeout,
            server_settings={"application_name": settings.app_name},
        )
        logger.debug(
            "Graph pool ready (%d-%d connections)",
            settings.postgres_pool_min_size,
            settings.postgres_pool_max_size,
        )

    return _pool


async def close_graph_db_pool() -> None:
    """Close the graph connection pool if one was opened."""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None
        logger.debug("Graph pool closed")
