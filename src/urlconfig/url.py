from __future__ import annotations

import re

import httpx

from .errors import MalformedURLError

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_AUTHORITY = re.compile(r"^(?:[^:/?#]*:)?//([^/?#]*)")


def _check_syntax(raw: str) -> None:
    # httpx repairs these silently; reject them so factories see the URL as written.
    head = re.split(r"[/?#]", raw, maxsplit=1)[0]
    if ":" in head:
        scheme = head.split(":", 1)[0]
        if not _SCHEME.fullmatch(scheme):
            raise httpx.InvalidURL(f"invalid scheme: {scheme!r}")

    bad = _BAD_ESCAPE.search(raw)
    if bad is not None:
        raise httpx.InvalidURL(f"invalid escape: {raw[bad.start():bad.start() + 3]!r}")

    authority = _AUTHORITY.match(raw)
    if authority is not None and " " in authority.group(1):
        raise httpx.InvalidURL(f"invalid character in host: {authority.group(1)!r}")


def parse_url(raw: str) -> httpx.URL:
    """Parse `raw` with httpx's RFC 3986 parser.

    Schemes are not restricted to http(s); any `scheme://authority/path?query#fragment`
    form is accepted and the scheme comes back lower-cased. Relative references
    without a colon parse too, with an empty scheme.

    On top of httpx's own checks, a malformed scheme, a `%` not followed by two
    hex digits and a space in the authority are rejected.
    """

    if not isinstance(raw, str):
        raise TypeError(f"url must be a str, got {type(raw).__name__}")
    try:
        _check_syntax(raw)
        return httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise MalformedURLError(raw, str(e)) from e
