"""Crumbs: a small codec for HTTP ``Cookie`` and ``Set-Cookie`` header values.

Basic usage::

    from crumbs import ResponseCookie, parse_cookie, parse_set_cookie, stringify_cookie

    stringify_cookie(ResponseCookie("id", "a b", path="/", http_only=True))
    # 'id=a%20b; Path=/; HttpOnly'

    parse_cookie("id=abc; theme=dark")
    # {'id': 'abc', 'theme': 'dark'}

    parse_set_cookie("id=abc; Path=/; Max-Age=3600; SameSite=Lax")
    # ResponseCookie(name='id', value='abc', path='/', max_age=3600, same_site='lax', ...)
"""

__version__ = "0.1.0"
__all__ = [
    "CookieDecodeError",
    "CookieError",
    "InvalidDate",
    "RequestCookie",
    "ResponseCookie",
    "parse_cookie",
    "parse_set_cookie",
    "stringify_cookie",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CookieDecodeError": "crumbs.errors",
    "CookieError": "crumbs.errors",
    "InvalidDate": "crumbs._internal.dates",
    "RequestCookie": "crumbs.cookie",
    "ResponseCookie": "crumbs.cookie",
    "parse_cookie": "crumbs.parse",
    "parse_set_cookie": "crumbs.parse",
    "stringify_cookie": "crumbs.serialize",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumbs`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
