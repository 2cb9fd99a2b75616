"""Parsing of ``Link`` response headers (RFC 8288, formerly RFC 5988).

A header value is a comma separated list of link-values::

    <https://api.example.com/items?page=2>; rel="next", <...?page=9>; rel="last"

Only the target URL and parameters are extracted; ``next_link`` then picks
the first ``rel="next"`` target. Anything that cannot be understood is
skipped rather than raised, so a partially broken header reads the same as
a header with no next page.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import httpx

from simplehttp.core.logging import get_logger
from simplehttp.models.headers import Headers


logger = get_logger(__name__)

LINK_HEADER = "Link"
NEXT_REL = "next"

_TARGET = re.compile(r"\s*<(?P<url>[^>]*)>\s*")
# Quoted strings are consumed whole, so ";", "," and "<" inside them are data
_PARAM = re.compile(
    r""";\s*(?P<key>[!#$%&'*+\-.^_`|~\w]+)\s*"""
    r"""(?:=\s*(?:"(?P<quoted>(?:[^"\\]|\\.)*)"|(?P<token>[^;,\s]*)))?\s*"""
)
_QUOTED_PAIR = re.compile(r"\\(.)")


@dataclass(frozen=True)
class LinkValue:
    """One ``<url>; param=value`` entry of a Link header."""

    url: str
    params: dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def rel(self) -> str | None:
        return self.params.get("rel")

    @property
    def relations(self) -> list[str]:
        """Relation types; ``rel`` may hold several separated by spaces."""
        return self.rel.split() if self.rel else []


def _skip_value(value: str, pos: int) -> int:
    """Return the position just past the next comma outside a quoted string."""
    in_quotes = False
    while pos < len(value):
        char = value[pos]
        if in_quotes:
            if char == "\\":
                pos += 1
            elif char == '"':
                in_quotes = False
        elif char == '"':
            in_quotes = True
        elif char == ",":
            return pos + 1
        pos += 1
    return pos


def _parse_params(value: str, pos: int) -> tuple[dict[str, str], int]:
    params: dict[str, str] = {}
    while True:
        match = _PARAM.match(value, pos)
        if match is None:
            return params, pos
        pos = match.end()
        key = match.group("key").lower()
        quoted = match.group("quoted")
        if quoted is not None:
            param = _QUOTED_PAIR.sub(r"\1", quoted)
        else:
            param = match.group("token") or ""
        # First occurrence of a parameter wins
        params.setdefault(key, param)


def parse_link_header(value: str) -> list[LinkValue]:
    """Split a Link header value into its link-values, in order.

    Text that does not start with a ``<target>`` is skipped up to the next
    comma outside a quoted string.
    """
    links = []
    pos = 0
    while pos < len(value):
        target = _TARGET.match(value, pos)
        if target is None:
            pos = _skip_value(value, pos)
            continue
        params, pos = _parse_params(value, target.end())
        links.append(LinkValue(url=target.group("url").strip(), params=params))
        pos = _skip_value(value, pos)
    return links


def is_absolute_url(url: str) -> bool:
    """True if ``url`` parses and names both a scheme and a host."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError):
        return False
    return bool(parsed.scheme) and bool(parsed.host)


def next_link(headers: Headers, *, case_sensitive: bool = True) -> str | None:
    """Return the target of the first ``rel="next"`` link, or ``None``.

    Args:
        headers: Response headers to search
        case_sensitive: Match the ``Link`` header name exactly (default) or
            case-insensitively

    Returns:
        The next page URL, or ``None`` when there is no usable next link
    """
    link = headers.find(LINK_HEADER, case_sensitive=case_sensitive)
    if link is None:
        return None

    for value in parse_link_header(link.value):
        if NEXT_REL not in value.relations:
            continue
        if not is_absolute_url(value.url):
            logger.warning(
                "link_header_malformed",
                url=value.url,
                reason="next link is not an absolute URL",
            )
            return None
        return value.url

    logger.debug("link_header_without_next", link=link.value)
    return None


__all__ = [
    "LINK_HEADER",
    "LinkValue",
    "NEXT_REL",
    "is_absolute_url",
    "next_link",
    "parse_link_header",
]
