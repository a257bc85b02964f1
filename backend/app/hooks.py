"""Per-request hook: client IP resolution, request logging and header policy.

The hook only depends on two capabilities of the hosting framework, described
by `RequestEvent` (read the request) and `Resolver` (produce the response), so
it can be driven by the Starlette adapter in `app.middleware.request_hooks` or
by plain stubs in tests.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol

from app.middleware.client_ip import present_proxy_headers, resolve_client_ip
from app.middleware.security import apply_security_headers
from app.utils import truncate


USER_AGENT_LOG_LENGTH = 50

_log = logging.getLogger(__name__)


class RequestEvent(Protocol):
    headers: Mapping[str, str]
    method: str
    path: str
    query: str

    def client_address(self) -> str:
        ...


Resolver = Callable[[Any], Awaitable[Any]]


def _target(event: RequestEvent) -> str:
    if event.query:
        return f"{event.path}?{event.query}"
    return event.path


async def handle(event: RequestEvent, resolve: Resolver, logger: Optional[logging.Logger] = None):
    """Run one request through the resolver and harden its response headers.

    Returns the response object produced by `resolve`, with its ``headers``
    mutated by `apply_security_headers`. Errors raised by `resolve` or by the
    event's fallback address accessor propagate unchanged.
    """
    logger = logger or _log

    started_at = datetime.now(timezone.utc).isoformat()
    start = time.perf_counter()

    headers = event.headers
    method = event.method.upper()
    target = _target(event)
    ip = resolve_client_ip(headers, event.client_address)
    user_agent = truncate(headers.get("user-agent"), USER_AGENT_LOG_LENGTH)

    logger.info("--> %s %s ip=%s ua=%r at=%s", method, target, ip, user_agent, started_at)
    logger.info("proxy headers for %s %s: %s", method, target, present_proxy_headers(headers))

    try:
        response = await resolve(event)
    except Exception:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.exception("<-- %s %s failed after %.1fms ip=%s", method, target, elapsed_ms, ip)
        raise

    apply_security_headers(response.headers)

    elapsed_ms = (time.perf_counter() - start) * 1000
    status = getattr(response, "status_code", None)
    logger.info("<-- %s %s %s in %.1fms ip=%s", method, target, status, elapsed_ms, ip)
    return response
