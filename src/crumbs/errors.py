"""Crumbs exception hierarchy.

The public parse and serialize functions never let these escape on
malformed input. They exist so the internal helpers can signal failure
and the parsers can catch one well-known type.
"""

from dataclasses import dataclass


class CookieError(Exception):
    """Base for all crumbs-specific errors."""


@dataclass(frozen=True, slots=True)
class CookieDecodeError(CookieError, ValueError):
    """A cookie value could not be percent-decoded.

    Raised by ``decode_component`` for a ``%`` that is not followed by
    two hex digits, or for escapes that do not form valid UTF-8.
    """

    value: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"cannot decode {self.value!r}: {self.detail}"
        return f"cannot decode {self.value!r}"
