from fastapi import FastAPI
from app.middleware.request_hooks import RequestHooksMiddleware
from app.routes import pages as pages_router
import logging
import logging.config
from typing import Optional

from app.config import settings


# Configure logging centrally and allow log level from settings
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%SZ",
        }
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "default",
            "level": settings.LOG_LEVEL,
        }
    },
    "root": {"handlers": ["stdout"], "level": settings.LOG_LEVEL},
    "loggers": {
        "uvicorn.error": {"level": settings.LOG_LEVEL, "handlers": ["stdout"], "propagate": False},
        "uvicorn.access": {"level": settings.LOG_LEVEL, "handlers": ["stdout"], "propagate": False},
    },
}

logging.config.dictConfig(LOGGING_CONFIG)


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    app = FastAPI(
        debug=settings.DEBUG,
        title=settings.PROJECT_NAME,
        # no API docs on the public site
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Sits outside the exception middleware, so 404 and 422 responses get the headers too
    app.add_middleware(RequestHooksMiddleware, logger=logger or logging.getLogger("app.hooks"))

    # include routers
    app.include_router(pages_router.router)

    return app


app = create_app()
