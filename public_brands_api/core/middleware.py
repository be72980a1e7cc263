"""Application middleware."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from public_brands_api.core.context import (
    clear_request_context,
    elapsed_ms,
    mark_request_start,
    new_transaction_id,
    set_transaction_id,
)

TRANSACTION_ID_HEADER = "X-Request-Id"

logger = logging.getLogger(__name__)


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach the transaction id to contextvars and log the request.

    The incoming `X-Request-Id` is reused when present, otherwise a new one is
    generated. Either way it is echoed back on the response.
    """
    clear_request_context()

    transaction_id = request.headers.get(TRANSACTION_ID_HEADER) or new_transaction_id()
    set_transaction_id(transaction_id)
    started_at = mark_request_start()

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers[TRANSACTION_ID_HEADER] = transaction_id
        return response
    finally:
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms(started_at),
        )
        # Always clean up to avoid context leaking across requests.
        clear_request_context()
