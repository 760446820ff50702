from typing import Optional

import httpx

from fetchaller.core.config import settings
from fetchaller.core.diagnostics import debug
from fetchaller.fetch.base import FetchFailure, FetchOutcome, FetchSuccess, NormalizedTarget
from fetchaller.fetch.classifier import classify, render_body
from fetchaller.fetch.errors import FetchError
from fetchaller.fetch.scraper import fetch_response
from fetchaller.fetch.urls import normalize_url
from fetchaller.fetch.utils import truncate
from fetchaller.schemas import ToolResponse


async def fetch_content(
    target: NormalizedTarget,
    max_tokens: int,
    timeout_seconds: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchOutcome:
    """
    Fetch pipeline for an already normalized target.

    1. Fetch (one retry on 5xx, shared timeout)
    2. Classify by declared content type
    3. Reduce HTML to markdown, pass other kinds through
    4. Truncate to the token budget
    """
    url = target.effective_url
    try:
        response = await fetch_response(url, timeout_seconds, transport=transport)
        debug(f"RESPONSE {url}: HTTP {response.status_code}, {response.content_type or 'no content type'}, {len(response.text)} chars")

        kind = classify(response.content_type)
        body = render_body(kind, response.text)
        debug(f"CONVERTED {url} as {kind.value}: {len(body)} chars")

        return FetchSuccess(
            body=truncate(body, max_tokens),
            media_kind=kind,
            final_url=response.final_url,
        )
    except FetchError as e:
        debug(f"FAILED {url}: {e.reason}")
        return FetchFailure(kind=e.kind, reason=e.reason, partial_body=e.partial_body)


def annotate(text: str, target: NormalizedTarget, final_url: str) -> str:
    if target.was_rewritten:
        return f"[Fetched via: {target.effective_url}]\n\n{text}"
    if final_url and final_url != target.effective_url:
        return f"[Redirected to: {final_url}]\n\n{text}"
    return text


def failure_response(failure: FetchFailure) -> ToolResponse:
    text = f"Error: {failure.reason}"
    if failure.partial_body:
        text = f"{text}\n\nPartial content:\n{failure.partial_body}"
    return ToolResponse(text=text, is_error=True, error_kind=failure.kind.value)


async def run_fetch_tool(
    url: str,
    max_tokens: Optional[int] = None,
    timeout_seconds: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ToolResponse:
    """
    Entry point of the fetch tool: normalize, fetch, convert and annotate.

    Never raises for fetch problems; they come back as error-flagged responses.
    """
    if max_tokens is None:
        max_tokens = settings.DEFAULT_MAX_TOKENS
    if timeout_seconds is None:
        timeout_seconds = settings.DEFAULT_TIMEOUT_SECONDS

    try:
        target = normalize_url(url)
    except FetchError as e:
        return failure_response(FetchFailure(kind=e.kind, reason=e.reason))

    if target.was_rewritten:
        debug(f"REWRITTEN {url} -> {target.effective_url}")

    outcome = await fetch_content(target, max_tokens, timeout_seconds, transport=transport)
    if isinstance(outcome, FetchFailure):
        return failure_response(outcome)

    return ToolResponse(text=annotate(outcome.body, target, outcome.final_url))
