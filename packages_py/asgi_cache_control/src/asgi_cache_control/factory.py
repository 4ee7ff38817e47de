"""
Factory functions for wiring CacheControlMiddleware into ASGI apps.
"""
import logging
from typing import Optional

from starlette.applications import Starlette
from starlette.types import ASGIApp

from cache_control_policy import (
    AppliedCallback,
    CacheControlPolicyConfig,
    PolicyTable,
    SkippedCallback,
    create_policy_table,
)

from .middleware import CacheControlMiddleware

logger = logging.getLogger(__name__)


def create_cache_control_middleware(
    app: ASGIApp,
    *,
    config: Optional[CacheControlPolicyConfig] = None,
    table: Optional[PolicyTable] = None,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
) -> CacheControlMiddleware:
    """
    Wrap an ASGI app with CacheControlMiddleware.

    Args:
        app: The ASGI application to wrap
        config: Policy configuration (default: static asset preset)
        table: Prebuilt policy table
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when the header is kept

    Returns:
        CacheControlMiddleware instance
    """
    return CacheControlMiddleware(
        app,
        config=config,
        table=table,
        on_applied=on_applied,
        on_skipped=on_skipped,
    )


def add_cache_control_middleware(
    app: Starlette,
    *,
    config: Optional[CacheControlPolicyConfig] = None,
    table: Optional[PolicyTable] = None,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
) -> PolicyTable:
    """
    Register CacheControlMiddleware on a Starlette or FastAPI application.

    The policy table is built immediately so a bad configuration fails
    here rather than when the middleware stack is first assembled.

    Args:
        app: Starlette or FastAPI application
        config: Policy configuration (default: static asset preset)
        table: Prebuilt policy table
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when the header is kept

    Returns:
        The policy table used by the middleware

    Raises:
        ValueError: If both config and table are given
        CacheControlPolicyError: If config is invalid
    """
    if config is not None and table is not None:
        raise ValueError("Pass either config or table, not both")

    if table is None:
        table = create_policy_table(config)

    app.add_middleware(
        CacheControlMiddleware,
        table=table,
        on_applied=on_applied,
        on_skipped=on_skipped,
    )
    logger.info(f"Registered CacheControlMiddleware: {table!r}")
    return table
