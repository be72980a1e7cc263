"""PostgreSQL connection management."""

from .graph_connection import close_graph_db_pool, get_graph_db_pool

__all__ = ["get_graph_db_pool", "close_graph_db_pool"]
