"""Cookie value objects.

``RequestCookie`` is what a client sends back in a ``Cookie`` header.
``ResponseCookie`` is the decoded form of a ``Set-Cookie`` header and the
input to ``stringify_cookie``.
"""

from dataclasses import dataclass, fields
from typing import Any

from crumbs._internal.types import Expires, Priority, SameSite


@dataclass(frozen=True, slots=True)
class RequestCookie:
    """A name/value pair as sent by a client."""

    name: str
    value: str = ""

    def to_header_value(self) -> str:
        """Serialize to a ``name=value`` string."""
        from crumbs.serialize import stringify_cookie

        return stringify_cookie(self)


@dataclass(frozen=True, slots=True)
class ResponseCookie:
    """A cookie as sent by a server in ``Set-Cookie``.

    Every attribute is optional; ``None`` means "not set" and is never
    emitted.
    """

    name: str
    value: str = ""
    domain: str | None = None
    path: str | None = None
    expires: Expires | None = None
    max_age: int | float | None = None
    secure: bool | None = None
    http_only: bool | None = None
    same_site: SameSite | None = None
    priority: Priority | None = None

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        from crumbs.serialize import stringify_cookie

        return stringify_cookie(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the truthy fields only, in declaration order.

        Empty ``name`` or ``value`` are left out as well.
        """
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value:
                result[f.name] = value
        return result
