"""Utility modules for simplehttp."""

from .links import LinkValue, is_absolute_url, next_link, parse_link_header


__all__ = [
    "LinkValue",
    "is_absolute_url",
    "next_link",
    "parse_link_header",
]
