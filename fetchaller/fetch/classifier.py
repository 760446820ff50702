"""
Content-type dispatch for fetched bodies.

Raw formats pass through untouched; HTML goes through the reducer. Anything
not listed in MEDIA_TYPES is rejected rather than guessed at.
"""
from fetchaller.fetch.base import MediaKind
from fetchaller.fetch.errors import UnsupportedContentTypeError
from fetchaller.fetch.html_analyzer import html_to_markdown

# Checked in order; first substring match wins
MEDIA_TYPES = (
    (MediaKind.JSON, ("application/json",)),
    (MediaKind.TEXT, ("text/plain",)),
    (MediaKind.XML, ("text/xml", "application/xml", "application/rss+xml", "application/atom+xml")),
    (MediaKind.CSV, ("text/csv",)),
    (MediaKind.MARKDOWN, ("text/html", "application/xhtml")),
)


def classify(content_type: str) -> MediaKind:
    declared = (content_type or "").lower()
    for kind, patterns in MEDIA_TYPES:
        if any(pattern in declared for pattern in patterns):
            return kind
    raise UnsupportedContentTypeError(content_type or "")


def render_body(kind: MediaKind, body: str) -> str:
    if kind is MediaKind.MARKDOWN:
        return html_to_markdown(body)
    return body
