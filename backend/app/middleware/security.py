from typing import MutableMapping


CONTENT_SECURITY_POLICY = "; ".join(
    [
        "default-src 'none'",
        "style-src 'self' 'unsafe-inline'",
        "img-src 'self' data:",
        "form-action 'self'",
        "base-uri 'self'",
        "frame-ancestors 'none'",
        "object-src 'none'",
        # pages are rendered server-side only
        "script-src 'none'",
    ]
)

SECURITY_HEADERS = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "Referrer-Policy": "no-referrer",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}

# Headers that identify the server stack
STRIPPED_HEADERS = ("Server", "X-Powered-By")


def _drop(headers: MutableMapping[str, str], name: str) -> None:
    wanted = name.lower()
    for key in {k for k in headers.keys() if k.lower() == wanted}:
        del headers[key]


def apply_security_headers(headers: MutableMapping[str, str]) -> MutableMapping[str, str]:
    """Write the fixed privacy/security policy into a response header mapping.

    Works with Starlette ``MutableHeaders`` as well as a plain dict; name
    matching is case-insensitive so a dict never ends up with two spellings
    of the same header. The mapping is mutated in place and returned.
    """
    for name, value in SECURITY_HEADERS.items():
        _drop(headers, name)
        headers[name] = value
    for name in STRIPPED_HEADERS:
        _drop(headers, name)
    return headers
