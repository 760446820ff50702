"""
Failure kinds raised by the fetch pipeline.

Every error is terminal for the invocation. The facade turns them into
FetchFailure values; only HttpStatusError carries a partial body.
"""
from typing import Optional

from fetchaller.fetch.base import ErrorKind


class FetchError(Exception):
    kind: ErrorKind = ErrorKind.NETWORK_FAILURE

    def __init__(self, reason: str, partial_body: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.partial_body = partial_body


class InvalidProtocolError(FetchError):
    kind = ErrorKind.INVALID_PROTOCOL

    def __init__(self, scheme: str):
        super().__init__(f"Invalid protocol: {scheme}:. Only http/https supported.")
        self.scheme = scheme


class InvalidUrlError(FetchError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url}")
        self.url = url


class HttpStatusError(FetchError):
    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status: int, partial_body: Optional[str] = None):
        super().__init__(f"HTTP {status}", partial_body=partial_body or None)
        self.status = status


class RateLimitedError(FetchError):
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, retry_after: Optional[str] = None):
        hint = f" Retry after {retry_after} seconds." if retry_after else ""
        super().__init__(f"Rate limited (HTTP 429).{hint}")
        self.retry_after = retry_after


class FetchTimeoutError(FetchError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, seconds: float):
        if isinstance(seconds, float) and not seconds.is_integer():
            limit = str(seconds)
        else:
            limit = str(int(seconds))
        super().__init__(f"Request timed out ({limit}s limit)")
        self.seconds = seconds


class UnsupportedContentTypeError(FetchError):
    kind = ErrorKind.UNSUPPORTED_CONTENT_TYPE

    def __init__(self, content_type: str):
        super().__init__(f"Unsupported content type: {content_type}")
        self.content_type = content_type


class NetworkError(FetchError):
    kind = ErrorKind.NETWORK_FAILURE

    def __init__(self, message: str):
        super().__init__(f"Fetch failed: {message}")
        self.message = message
