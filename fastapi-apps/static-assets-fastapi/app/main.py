"""Static Assets FastAPI Application - Main Entry Point."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI

from asgi_cache_control import add_cache_control_middleware
from app.config import settings
from app.routes import assets

logger = logging.getLogger(__name__)


def log_applied(content_type: Optional[str], directive: str) -> None:
    logger.debug(f"Cache-Control {directive!r} applied for content type {content_type!r}")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Fails at import time if the configured policy is invalid
policy_table = add_cache_control_middleware(
    app,
    config=settings.cache_control_policy(),
    on_applied=log_applied,
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/policy")
async def get_policy():
    """Describe the active Cache-Control policy."""
    return {
        "default": policy_table.default,
        "rules": [
            {"pattern": str(rule.pattern), "directive": rule.directive}
            for rule in policy_table.rules
        ],
    }


app.include_router(assets.router, tags=["assets"])


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
