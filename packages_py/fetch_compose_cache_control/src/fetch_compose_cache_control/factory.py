"""
Factory functions for creating Cache-Control policy transports.
"""
from typing import Callable, Optional

import httpx

from cache_control_policy import (
    AppliedCallback,
    CacheControlPolicyConfig,
    PolicyTable,
    SkippedCallback,
)

from .transport import CacheControlTransport, SyncCacheControlTransport


def compose_transport(
    base: httpx.AsyncBaseTransport,
    *wrappers: Callable[[httpx.AsyncBaseTransport], httpx.AsyncBaseTransport],
) -> httpx.AsyncBaseTransport:
    """
    Compose multiple transport wrappers together.

    Wrappers are applied in order, so the last one is outermost.

    Example:
        base = httpx.AsyncHTTPTransport()
        transport = compose_transport(
            base,
            lambda inner: CacheControlTransport(inner, config=config),
        )
    """
    transport = base
    for wrapper in wrappers:
        transport = wrapper(transport)
    return transport


def compose_sync_transport(
    base: httpx.BaseTransport,
    *wrappers: Callable[[httpx.BaseTransport], httpx.BaseTransport],
) -> httpx.BaseTransport:
    """Compose multiple sync transport wrappers together."""
    transport = base
    for wrapper in wrappers:
        transport = wrapper(transport)
    return transport


def create_cache_control_transport(
    inner: Optional[httpx.AsyncBaseTransport] = None,
    *,
    config: Optional[CacheControlPolicyConfig] = None,
    table: Optional[PolicyTable] = None,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
) -> CacheControlTransport:
    """
    Create a Cache-Control policy transport.

    Args:
        inner: The inner transport (defaults to AsyncHTTPTransport)
        config: Policy configuration (default: static asset preset)
        table: Prebuilt policy table
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when the header is kept

    Returns:
        CacheControlTransport instance
    """
    if inner is None:
        inner = httpx.AsyncHTTPTransport()

    return CacheControlTransport(
        inner,
        config=config,
        table=table,
        on_applied=on_applied,
        on_skipped=on_skipped,
    )


def create_cache_control_sync_transport(
    inner: Optional[httpx.BaseTransport] = None,
    *,
    config: Optional[CacheControlPolicyConfig] = None,
    table: Optional[PolicyTable] = None,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
) -> SyncCacheControlTransport:
    """
    Create a sync Cache-Control policy transport.

    Args:
        inner: The inner transport (defaults to HTTPTransport)
        config: Policy configuration (default: static asset preset)
        table: Prebuilt policy table
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when the header is kept

    Returns:
        SyncCacheControlTransport instance
    """
    if inner is None:
        inner = httpx.HTTPTransport()

    return SyncCacheControlTransport(
        inner,
        config=config,
        table=table,
        on_applied=on_applied,
        on_skipped=on_skipped,
    )


def create_cache_control_client(
    *,
    config: Optional[CacheControlPolicyConfig] = None,
    table: Optional[PolicyTable] = None,
    inner: Optional[httpx.AsyncBaseTransport] = None,
    base_url: Optional[str] = None,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
    **client_kwargs,
) -> httpx.AsyncClient:
    """
    Create an httpx.AsyncClient whose responses carry policy Cache-Control headers.

    Args:
        config: Policy configuration
        table: Prebuilt policy table
        inner: The inner transport (defaults to AsyncHTTPTransport)
        base_url: Base URL for the client
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when the header is kept
        **client_kwargs: Additional arguments for httpx.AsyncClient

    Returns:
        AsyncClient with Cache-Control policy transport
    """
    transport = create_cache_control_transport(
        inner,
        config=config,
        table=table,
        on_applied=on_applied,
        on_skipped=on_skipped,
    )

    return httpx.AsyncClient(
        transport=transport,
        base_url=base_url or "",
        **client_kwargs,
    )


def create_cache_control_sync_client(
    *,
    config: Optional[CacheControlPolicyConfig] = None,
    table: Optional[PolicyTable] = None,
    inner: Optional[httpx.BaseTransport] = None,
    base_url: Optional[str] = None,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
    **client_kwargs,
) -> httpx.Client:
    """
    Create an httpx.Client whose responses carry policy Cache-Control headers.

    Args:
        config: Policy configuration
        table: Prebuilt policy table
        inner: The inner transport (defaults to HTTPTransport)
        base_url: Base URL for the client
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when the header is kept
        **client_kwargs: Additional arguments for httpx.Client

    Returns:
        Client with Cache-Control policy transport
    """
    transport = create_cache_control_sync_transport(
        inner,
        config=config,
        table=table,
        on_applied=on_applied,
        on_skipped=on_skipped,
    )

    return httpx.Client(
        transport=transport,
        base_url=base_url or "",
        **client_kwargs,
    )
