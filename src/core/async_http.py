"""Async HTTP utilities using httpx.

One request per call, no retry and no caching: a failed fetch surfaces as
AsyncHttpError and the caller decides what to do with it.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from config import settings

log = logging.getLogger(__name__)


class AsyncHttpError(RuntimeError):
    pass


def make_client() -> httpx.AsyncClient:
    headers = {"User-Agent": settings.DEFAULT_USER_AGENT}
    return httpx.AsyncClient(headers=headers, timeout=settings.DEFAULT_TIMEOUT)


async def fetch(url: str, *, client: Optional[httpx.AsyncClient] = None) -> str:
    close_client = False
    if client is None:
        client = make_client()
        close_client = True
    try:
        log.debug("GET %s", url)
        try:
            resp = await client.get(url)
        except httpx.HTTPError as e:
            raise AsyncHttpError(f"Failed to fetch {url}: {e}") from e
        if resp.is_error:
            raise AsyncHttpError(
                f"Failed to fetch {url}: {resp.status_code} {resp.reason_phrase}"
            )
        return resp.text
    finally:
        if close_client:
            await client.aclose()
