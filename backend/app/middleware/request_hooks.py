import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from app.hooks import handle


class StarletteRequestEvent:
    """Read-only view of a Starlette request in the shape `app.hooks` expects."""

    def __init__(self, request: Request):
        self._request = request
        self.headers = request.headers
        self.method = request.method
        self.path = request.url.path
        self.query = request.url.query

    def client_address(self) -> str:
        client = self._request.client
        return client.host if client else "unknown"


class RequestHooksMiddleware(BaseHTTPMiddleware):
    """Runs every request through `app.hooks.handle`.

    The downstream app (routing and rendering) is the resolver; the response it
    returns gets the fixed security headers before it leaves the server.
    """

    def __init__(self, app: ASGIApp, logger: Optional[logging.Logger] = None) -> None:
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        event = StarletteRequestEvent(request)

        logger = self.logger or logging.getLogger("app.hooks")

        # An unhandled route error becomes a plain 500 here, inside the hook,
        # so the error page also leaves with the security headers
        async def resolve(_event):
            try:
                return await call_next(request)
            except Exception:
                logger.exception("Unhandled error rendering %s %s", event.method, event.path)
                return PlainTextResponse("Internal Server Error", status_code=500)

        return await handle(event, resolve, logger=logger)
