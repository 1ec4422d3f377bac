"""URI-component percent-encoding for cookie values."""

import re
from urllib.parse import quote, unquote

from crumbs.errors import CookieDecodeError

# Left unescaped in addition to ASCII letters, digits and "_.-"
_SAFE_CHARS = "!~*'()"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_component(value: str) -> str:
    """Percent-encode *value* as UTF-8, keeping ``A-Za-z0-9-_.!~*'()``."""
    return quote(value, safe=_SAFE_CHARS)


def decode_component(value: str) -> str:
    """Strictly percent-decode *value*.

    Unlike ``urllib.parse.unquote`` this refuses to guess: a stray ``%``
    or an escape sequence that is not valid UTF-8 raises
    ``CookieDecodeError``. ``+`` is left alone.
    """
    if "%" not in value:
        return value
    match = _BAD_ESCAPE.search(value)
    if match is not None:
        raise CookieDecodeError(value, f"malformed escape at offset {match.start()}")
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError as exc:
        raise CookieDecodeError(value, "escapes are not valid UTF-8") from exc
