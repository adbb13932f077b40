"""
Cursor pagination over listing endpoints.

Any sub-API method taking a cursor keyword can be walked:

    for page in iter_pages(client.addresses.utxos_by_address, addr, count=100):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from maestro.data.models.common import Paginated

logger = logging.getLogger(__name__)


def iter_pages(
    call: Callable[..., dict],
    *args: Any,
    cursor: str | None = None,
    max_pages: int | None = None,
    **kwargs: Any,
) -> Iterator[dict]:
    """Yield raw pages, passing each next_cursor back until it is absent."""
    pages = 0
    while True:
        payload = call(*args, cursor=cursor, **kwargs)
        yield payload
        pages += 1
        next_cursor = Paginated.from_dict(payload).next_cursor if isinstance(payload, dict) else None
        if not next_cursor:
            return
        if next_cursor == cursor:
            logger.warning(f"Cursor {cursor!r} repeated by the service; stopping pagination")
            return
        if max_pages is not None and pages >= max_pages:
            logger.debug(f"Stopping pagination after {pages} pages (next cursor {next_cursor!r})")
            return
        cursor = next_cursor


def iter_items(call: Callable[..., dict], *args: Any, **kwargs: Any) -> Iterator[Any]:
    """Yield the entries of every page's data array."""
    for payload in iter_pages(call, *args, **kwargs):
        yield from payload.get("data") or []
