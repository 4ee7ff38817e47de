"""
ASGI middleware that sets Cache-Control from a content-type policy.

Implemented as a plain ASGI wrapper around `send` so streaming and
file responses are decorated without buffering the body.
"""
import logging
from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cache_control_policy import (
    AppliedCallback,
    CacheControlPolicyConfig,
    PolicyTable,
    SkippedCallback,
    apply_cache_control,
    create_policy_table,
)

logger = logging.getLogger(__name__)


class CacheControlMiddleware:
    """
    Sets the Cache-Control header on HTTP responses based on Content-Type.

    A Cache-Control header set by the route (or an inner middleware) is
    never overwritten. Websocket and lifespan scopes pass through.

    Example:
        app.add_middleware(
            CacheControlMiddleware,
            config=CacheControlPolicyConfig(
                rules=[("text/html", "no-cache"), ("image/*", "public, max-age=86400")],
                default="no-store",
            ),
        )
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        config: Optional[CacheControlPolicyConfig] = None,
        table: Optional[PolicyTable] = None,
        on_applied: Optional[AppliedCallback] = None,
        on_skipped: Optional[SkippedCallback] = None,
    ) -> None:
        """
        Create a new CacheControlMiddleware.

        Args:
            app: The wrapped ASGI application
            config: Policy configuration (ignored if table is given)
            table: Prebuilt policy table
            on_applied: Callback with (content_type, directive) after writing
            on_skipped: Callback with the existing value when the header is kept

        Raises:
            ValueError: If both config and table are given
            CacheControlPolicyError: If config is invalid
        """
        if config is not None and table is not None:
            raise ValueError("Pass either config or table, not both")

        self.app = app
        self.table = table if table is not None else create_policy_table(config)
        self._on_applied = on_applied
        self._on_skipped = on_skipped
        logger.debug(f"CacheControlMiddleware: wrapping {type(app).__name__} with {self.table!r}")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_cache_control(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                apply_cache_control(
                    headers,
                    self.table,
                    on_applied=self._on_applied,
                    on_skipped=self._on_skipped,
                )
            await send(message)

        await self.app(scope, receive, send_with_cache_control)
