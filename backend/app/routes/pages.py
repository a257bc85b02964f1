from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app import schemas
from app.config import settings
from app.utils import sanitize_to_ascii

router = APIRouter()


_INDEX_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>body {{ font-family: monospace; max-width: 40em; margin: 2em auto; }}</style>
</head>
<body>
<h1>{title}</h1>
<p>This site is rendered on the server. No scripts are served.</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def index():
    title = escape(sanitize_to_ascii(settings.PROJECT_NAME))
    return _INDEX_TEMPLATE.format(title=title)


@router.get("/healthz")
def healthz():
    return {"status": "ok"}


# Untrusted text is reduced to printable ASCII before it is echoed back
@router.post("/preview", response_model=schemas.PreviewOut)
def preview(payload: schemas.PreviewIn):
    clean = sanitize_to_ascii(payload.text)
    return schemas.PreviewOut(text=clean, removed=len(payload.text) - len(clean))
