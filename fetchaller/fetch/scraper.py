import asyncio
from typing import Optional

import httpx

from fetchaller.core.config import settings
from fetchaller.core.diagnostics import debug
from fetchaller.fetch.base import RawResponse
from fetchaller.fetch.errors import (
    FetchTimeoutError,
    HttpStatusError,
    InvalidUrlError,
    NetworkError,
    RateLimitedError,
)

# 5xx responses get exactly one more attempt
MAX_RETRIES = 1


def build_headers() -> dict:
    return {
        "User-Agent": settings.USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "Upgrade-Insecure-Requests": "1",
        "Connection": "keep-alive",
    }


async def _get_with_retry(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """GET the URL, reissuing the request once on a 5xx."""
    for attempt in range(MAX_RETRIES + 1):
        debug(f"FETCH {url} (attempt {attempt + 1}/{MAX_RETRIES + 1})")
        response = await client.get(url)
        if response.status_code >= 500 and attempt < MAX_RETRIES:
            debug(f"RETRY {url} after HTTP {response.status_code}")
            continue
        return response


async def _fetch(url: str, timeout_seconds: float,
                 transport: Optional[httpx.AsyncBaseTransport]) -> RawResponse:
    async with httpx.AsyncClient(
        timeout=timeout_seconds,
        headers=build_headers(),
        follow_redirects=True,
        transport=transport,
    ) as client:
        response = await _get_with_retry(client, url)

    status = response.status_code
    if status == 429:
        raise RateLimitedError(response.headers.get("retry-after"))
    if not response.is_success:
        raise HttpStatusError(status, response.text[:settings.ERROR_BODY_LIMIT])

    return RawResponse(
        status_code=status,
        content_type=response.headers.get("content-type", ""),
        text=response.text,
        # Only report a new URL when httpx actually followed a redirect
        final_url=str(response.url) if response.history else url,
    )


async def fetch_response(
    url: str,
    timeout_seconds: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RawResponse:
    """
    Fetch a URL and return the decoded response.

    All attempts share a single deadline of ``timeout_seconds``; when it
    expires the in-flight request is cancelled and FetchTimeoutError raised.
    """
    try:
        return await asyncio.wait_for(_fetch(url, timeout_seconds, transport), timeout=timeout_seconds)
    except (asyncio.TimeoutError, httpx.TimeoutException):
        raise FetchTimeoutError(timeout_seconds)
    except httpx.HTTPError as e:
        raise NetworkError(str(e) or e.__class__.__name__)
    except httpx.InvalidURL:
        raise InvalidUrlError(url)
