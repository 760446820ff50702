"""
URL validation and site-specific rewrites applied before fetching.
"""
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import urlsplit, urlunsplit

from fetchaller.fetch.base import NormalizedTarget
from fetchaller.fetch.errors import InvalidProtocolError, InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class HostRewrite:
    hosts: Tuple[str, ...]
    target: str
    # Paths with these suffixes are explicit requests for structured data
    passthrough_suffixes: Tuple[str, ...] = ()


# old.reddit.com converts to roughly a third of the markdown new Reddit produces
HOST_REWRITES = (
    HostRewrite(
        hosts=("www.reddit.com", "reddit.com"),
        target="old.reddit.com",
        passthrough_suffixes=(".json",),
    ),
)


def _replace_host(parts, new_host: str) -> str:
    netloc = new_host
    if parts.port is not None:
        netloc = f"{netloc}:{parts.port}"
    userinfo, sep, _ = parts.netloc.rpartition("@")
    if sep:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def validate_url(url: str):
    """Parse an absolute http(s) URL, raising InvalidUrl/InvalidProtocol otherwise."""
    try:
        parts = urlsplit(url.strip())
        parts.port  # raises ValueError for an out-of-range port
    except ValueError:
        raise InvalidUrlError(url)

    if not parts.scheme:
        raise InvalidUrlError(url)
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidProtocolError(parts.scheme.lower())
    if not parts.hostname:
        raise InvalidUrlError(url)
    return parts


def normalize_url(url: str) -> NormalizedTarget:
    """
    Validate the URL and apply the host rewrite table.

    Rewrites are idempotent: the target host never matches its own rule.
    """
    parts = validate_url(url)
    hostname = parts.hostname

    for rule in HOST_REWRITES:
        if hostname not in rule.hosts:
            continue
        if parts.path.endswith(rule.passthrough_suffixes):
            break
        return NormalizedTarget(
            effective_url=_replace_host(parts, rule.target),
            was_rewritten=True,
        )

    return NormalizedTarget(effective_url=url.strip(), was_rewritten=False)
