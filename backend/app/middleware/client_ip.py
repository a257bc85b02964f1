from typing import Callable, Dict, Mapping, Optional, Tuple


# Consulted in this order; the first usable value wins.
PROXY_HEADERS: Tuple[str, ...] = (
    "x-forwarded-for",
    "x-real-ip",
    "cf-connecting-ip",
    "true-client-ip",
    "x-client-ip",
)

LOOPBACK = "127.0.0.1"
LOCALHOST = "localhost"


def _usable(value: Optional[str], sentinels: Tuple[str, ...]) -> bool:
    return bool(value) and value not in sentinels


def resolve_client_ip(headers: Mapping[str, str], fallback: Callable[[], str]) -> str:
    """Return the best-guess client IP for a request.

    `headers` must offer a case-insensitive ``get`` (Starlette ``Headers`` does).
    Values are compared as plain strings; nothing is parsed as an address, so
    ``"127.0.0.1:8080"`` counts as a real value. Only ``x-forwarded-for`` and
    ``x-real-ip`` reject ``localhost``; the CDN-style headers only reject the
    loopback address.
    """
    xff = headers.get("x-forwarded-for")
    if xff:
        first = xff.split(",")[0].strip()
        if _usable(first, (LOOPBACK, LOCALHOST)):
            return first

    real_ip = headers.get("x-real-ip")
    if _usable(real_ip, (LOOPBACK, LOCALHOST)):
        return real_ip

    for name in ("cf-connecting-ip", "true-client-ip", "x-client-ip"):
        value = headers.get(name)
        if _usable(value, (LOOPBACK,)):
            return value

    return fallback()


def present_proxy_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Return the proxy headers that carry a value, in lookup order.

    Empty values are left out, matching what `resolve_client_ip` ignores.
    """
    found = {}
    for name in PROXY_HEADERS:
        value = headers.get(name)
        if value:
            found[name] = value
    return found
