"""Start the site under uvicorn.

Usage:
    python -m app.run
    onion-site-hooks        # via [project.scripts]
"""

import uvicorn

from app.config import settings


def main() -> None:
    # uvicorn writes its own Server header below the ASGI app, out of reach
    # of the response hooks, so it is switched off here
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()
