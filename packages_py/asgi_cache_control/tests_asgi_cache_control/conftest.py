"""Pytest configuration and fixtures for asgi_cache_control tests."""
import pytest
from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse
from starlette.routing import Route, WebSocketRoute

from cache_control_policy import CacheControlPolicyConfig


SCENARIO_CONFIG = CacheControlPolicyConfig(
    rules=[("text/html", "no-cache"), ("image/*", "public, max-age=86400")],
    default="no-store",
)


async def html_page(request):
    return Response("<h1>hi</h1>", media_type="text/html")


async def jpeg_image(request):
    return Response(b"\xff\xd8\xff", media_type="image/jpeg")


async def json_data(request):
    return JSONResponse({"ok": True})


async def private_image(request):
    return Response(b"\x89PNG", media_type="image/png", headers={"Cache-Control": "private"})


async def no_content_type(request):
    return Response(status_code=204)


async def streamed_text(request):
    async def chunks():
        yield b"one "
        yield b"two"

    return StreamingResponse(chunks(), media_type="text/plain")


async def tagged_css(request):
    return PlainTextResponse(
        "body {}",
        media_type="text/css",
        headers={"ETag": '"v1"', "X-Custom": "kept"},
    )


async def echo_socket(websocket):
    await websocket.accept()
    await websocket.send_text("hello")
    await websocket.close()


ROUTES = [
    Route("/page", html_page),
    Route("/image.jpg", jpeg_image),
    Route("/data", json_data),
    Route("/private.png", private_image),
    Route("/empty", no_content_type),
    Route("/stream", streamed_text),
    Route("/style.css", tagged_css),
    WebSocketRoute("/ws", echo_socket),
]


@pytest.fixture
def scenario_config():
    return SCENARIO_CONFIG


@pytest.fixture
def starlette_app():
    """Bare Starlette application without middleware."""
    return Starlette(routes=ROUTES)
