from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MediaKind(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"
    TEXT = "text"
    XML = "xml"
    CSV = "csv"


class ErrorKind(str, Enum):
    INVALID_PROTOCOL = "invalid_protocol"
    INVALID_URL = "invalid_url"
    HTTP_ERROR = "http_error"
    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    UNSUPPORTED_CONTENT_TYPE = "unsupported_content_type"
    NETWORK_FAILURE = "network_failure"


@dataclass(frozen=True)
class NormalizedTarget:
    effective_url: str
    was_rewritten: bool


@dataclass
class RawResponse:
    status_code: int
    content_type: str
    text: str
    final_url: str


@dataclass
class FetchSuccess:
    body: str
    media_kind: MediaKind
    final_url: str


@dataclass
class FetchFailure:
    kind: ErrorKind
    reason: str
    partial_body: Optional[str] = None


FetchOutcome = Union[FetchSuccess, FetchFailure]
