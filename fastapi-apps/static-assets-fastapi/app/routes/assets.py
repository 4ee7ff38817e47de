"""Static asset and API routes."""

from datetime import datetime

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from cache_control_policy import mime_type_from_extension

router = APIRouter()

# In-memory assets keyed by file name
ASSETS: dict[str, bytes] = {
    "site.css": b"body { margin: 0; }",
    "app.js": b"console.log('ready');",
    "logo.svg": b'<svg xmlns="http://www.w3.org/2000/svg"/>',
    "index.html": b"<!doctype html><title>static-assets</title>",
}


class SessionResponse(BaseModel):
    """Session endpoint response."""

    user: str
    issuedAt: str


@router.get("/assets/{name}")
async def get_asset(name: str) -> Response:
    """
    Serve an in-memory asset with a content type derived from its extension.

    The Cache-Control header is filled in by the middleware.
    """
    body = ASSETS.get(name)
    if body is None:
        raise HTTPException(status_code=404, detail=f"Asset not found: {name}")

    ext = name.rsplit(".", 1)[-1] if "." in name else ""
    return Response(content=body, media_type=mime_type_from_extension(ext).value)


@router.get("/api/session", response_model=SessionResponse)
async def get_session(response: Response) -> SessionResponse:
    """User-specific data; opts out of the policy with an explicit header."""
    response.headers["Cache-Control"] = "private, no-store"
    return SessionResponse(user="demo", issuedAt=datetime.now().isoformat())
