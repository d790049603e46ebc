"""Parser for cursor-style ``Link`` response headers.

Canvas paginates list endpoints by returning navigation URLs in a ``Link``
header (RFC 8288 style)::

    <https://host/api/v1/courses?page=2>; rel="next", <https://host/api/v1/courses?page=9>; rel="last"

Each comma-separated entry is ``<URL>; rel="NAME"``. Only the ``next``
relation drives traversal; the others are kept for inspection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ...core.exceptions import PaginationFormatError
from .auth import is_header_safe

RELATIONS = frozenset({"current", "prev", "next", "first", "last"})

_REL_SEGMENT = re.compile(r' rel="([^"]*)"')


@dataclass(frozen=True)
class PaginationInfo:
    """Navigation URLs parsed from a single response.

    All fields are ``None`` when the response carried no ``Link`` header,
    which means the endpoint has exactly one page.
    """

    current: str | None = None
    prev: str | None = None
    next: str | None = None
    first: str | None = None
    last: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None


def parse_link_header(value: str | bytes | None) -> PaginationInfo:
    """Parse a raw ``Link`` header value.

    Args:
        value: Header value as received, or None when the header is absent

    Returns:
        PaginationInfo with every recognized relation populated. Unknown
        relation names are skipped.

    Raises:
        PaginationFormatError: If the value is not visible ASCII or an entry
            does not match ``<URL>; rel="NAME"``
    """
    if value is None:
        return PaginationInfo()

    header = _to_text(value)
    links: dict[str, str] = {}

    for entry in header.split(","):
        entry = entry.strip()
        url_segment, sep, rel_segment = entry.partition(";")
        if not sep:
            raise PaginationFormatError(f"Link entry has no ';' separator: {entry!r}", header)

        # Both brackets must be present.
        if len(url_segment) < 3 or url_segment[0] != "<" or url_segment[-1] != ">":
            raise PaginationFormatError(f"Link URL is not enclosed in '<' '>': {entry!r}", header)

        match = _REL_SEGMENT.fullmatch(rel_segment)
        if match is None:
            raise PaginationFormatError(f"Link entry has malformed rel: {entry!r}", header)

        rel = match.group(1)
        if rel in RELATIONS:
            links[rel] = url_segment[1:-1]

    return PaginationInfo(**links)


def _to_text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError as exc:
            raise PaginationFormatError("Link header is not valid ASCII") from exc

    if not is_header_safe(value):
        raise PaginationFormatError("Link header contains non-visible characters", value)
    return value
