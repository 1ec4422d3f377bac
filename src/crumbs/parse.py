"""Cookie and Set-Cookie header parsing.

``parse_cookie`` splits a header into an ordered name-value dict and is
used for both ``Cookie`` and ``Set-Cookie``. ``parse_set_cookie`` builds
on it, reading the first pair as the cookie and the rest as attributes.

Neither function raises on malformed input: a pair whose value cannot be
decoded is dropped, and attributes that cannot be understood are left
unset.
"""

import logging
import re
from typing import Any

from crumbs._internal.dates import InvalidDate, parse_http_date
from crumbs._internal.encoding import decode_component
from crumbs._internal.numbers import parse_number
from crumbs._internal.types import Priority, SameSite
from crumbs.cookie import ResponseCookie
from crumbs.errors import CookieDecodeError

logger = logging.getLogger("crumbs.parse")

SAME_SITE_VALUES: frozenset[str] = frozenset({"strict", "lax", "none"})
PRIORITY_VALUES: frozenset[str] = frozenset({"low", "medium", "high"})

_SEPARATOR = re.compile(r"; *")


def parse_cookie(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    A segment without ``=`` is a flag and maps to ``"true"``. Later
    duplicates overwrite earlier ones. Returns an empty dict for an
    empty header.
    """
    pairs: dict[str, str] = {}
    for segment in _SEPARATOR.split(header):
        if not segment:
            continue
        key, sep, raw = segment.partition("=")
        if not sep:
            pairs[segment] = "true"
            continue
        try:
            pairs[key] = decode_component(raw)
        except CookieDecodeError as exc:
            logger.debug("Dropping cookie pair %r: %s", key, exc)
    return pairs


def parse_same_site(value: str) -> SameSite | None:
    """Normalize a ``SameSite`` value, or ``None`` if unrecognized."""
    value = value.lower()
    return value if value in SAME_SITE_VALUES else None  # type: ignore[return-value]


def parse_priority(value: str) -> Priority | None:
    """Normalize a ``Priority`` value, or ``None`` if unrecognized."""
    value = value.lower()
    return value if value in PRIORITY_VALUES else None  # type: ignore[return-value]


def _attribute_key(key: str) -> str:
    return key.lower().replace("-", "")


def parse_set_cookie(header: str) -> ResponseCookie | None:
    """Parse a ``Set-Cookie`` header value.

    Returns ``None`` for an empty header. Attribute names are matched
    case-insensitively and ``Max-Age`` may be spelled with or without
    the hyphen. Unknown attributes are ignored.

    Attributes that come out falsy are left unset, so ``Max-Age=0``
    parses to ``max_age=None``. A non-numeric ``Max-Age`` becomes
    ``nan`` and an unreadable ``Expires`` becomes ``InvalidDate``.
    """
    if not header:
        return None

    pairs = iter(parse_cookie(header).items())
    first = next(pairs, None)
    if first is None:
        return None
    name, value = first
    attrs = {_attribute_key(k): v for k, v in pairs}

    expires = None
    if attrs.get("expires"):
        expires = parse_http_date(attrs["expires"])
        if isinstance(expires, InvalidDate):
            logger.debug("Unreadable Expires in cookie %r: %r", name, expires.raw)

    maxage = attrs.get("maxage")
    samesite = attrs.get("samesite")
    priority = attrs.get("priority")
    fields: dict[str, Any] = {
        "domain": attrs.get("domain"),
        "path": attrs.get("path"),
        "expires": expires,
        "max_age": parse_number(maxage) if maxage is not None else None,
        "secure": bool(attrs.get("secure")),
        "http_only": bool(attrs.get("httponly")),
        "same_site": parse_same_site(samesite) if samesite else None,
        "priority": parse_priority(priority) if priority else None,
    }
    # Falsy attributes are left unset rather than stored.
    return ResponseCookie(name=name, value=value, **{k: v for k, v in fields.items() if v})
