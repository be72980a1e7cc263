"""Request-scoped context.

We use `contextvars` so log records can carry the transaction id of the
request that produced them without passing it through every call.
"""

from __future__ import annotations

import contextvars
import uuid
from time import perf_counter

transaction_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "transaction_id", default=None
)
request_started_at_var: contextvars.ContextVar[float | None] = contextvars.ContextVar(
    "request_started_at", default=None
)


def new_transaction_id() -> str:
    return f"tid_{uuid.uuid4().hex[:10]}"


def set_transaction_id(transaction_id: str | None) -> None:
    _ = transaction_id_var.set(transaction_id)


def get_transaction_id() -> str | None:
    return transaction_id_var.get()


def mark_request_start() -> float:
    started_at = perf_counter()
    _ = request_started_at_var.set(started_at)
    return started_at


def elapsed_ms(started_at: float) -> float:
    return (perf_counter() - started_at) * 1000.0


def clear_request_context() -> None:
    _ = transaction_id_var.set(None)
    _ = request_started_at_var.set(None)
