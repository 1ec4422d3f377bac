"""Set-Cookie serialization."""

from datetime import datetime

from crumbs._internal.dates import InvalidDate, format_http_date, from_epoch_ms
from crumbs._internal.encoding import encode_component
from crumbs._internal.numbers import format_number
from crumbs._internal.types import Expires
from crumbs.cookie import RequestCookie, ResponseCookie


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _expires_text(expires: Expires) -> str:
    if _is_number(expires):
        return format_http_date(from_epoch_ms(expires))  # type: ignore[arg-type]
    if isinstance(expires, datetime | InvalidDate):
        return format_http_date(expires)
    return str(expires)


def stringify_cookie(cookie: RequestCookie | ResponseCookie) -> str:
    """Serialize *cookie* to a ``Set-Cookie`` header value.

    The value is always percent-encoded; name, path and domain are
    written as given. Attributes follow in a fixed order::

        Path, Expires, Max-Age, Domain, Secure, HttpOnly, SameSite, Priority

    Unset, empty or false attributes are skipped. ``max_age=0`` and
    ``expires=0`` are both emitted.
    """
    parts = [f"{cookie.name}={encode_component(cookie.value or '')}"]
    if not isinstance(cookie, ResponseCookie):
        return parts[0]

    if cookie.path:
        parts.append(f"Path={cookie.path}")
    expires = cookie.expires
    if expires or (_is_number(expires) and expires == 0):
        parts.append(f"Expires={_expires_text(expires)}")  # type: ignore[arg-type]
    if _is_number(cookie.max_age):
        parts.append(f"Max-Age={format_number(cookie.max_age)}")  # type: ignore[arg-type]
    if cookie.domain:
        parts.append(f"Domain={cookie.domain}")
    if cookie.secure:
        parts.append("Secure")
    if cookie.http_only:
        parts.append("HttpOnly")
    if cookie.same_site:
        parts.append(f"SameSite={cookie.same_site}")
    if cookie.priority:
        parts.append(f"Priority={cookie.priority}")
    return "; ".join(parts)
