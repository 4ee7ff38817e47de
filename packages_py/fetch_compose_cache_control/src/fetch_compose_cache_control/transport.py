"""
Cache-Control policy transport wrapper for httpx.

Annotates responses coming back from the inner transport with a
Cache-Control header chosen by content type. Useful in front of upstream
services whose responses are re-served (proxies, BFFs) and with
httpx.ASGITransport / MockTransport in tests.
"""
from typing import Optional

import httpx

from cache_control_policy import (
    AppliedCallback,
    CacheControlPolicyConfig,
    PolicyTable,
    SkippedCallback,
    apply_cache_control,
    create_policy_table,
)


def _resolve_table(
    config: Optional[CacheControlPolicyConfig],
    table: Optional[PolicyTable],
) -> PolicyTable:
    if config is not None and table is not None:
        raise ValueError("Pass either config or table, not both")
    return table if table is not None else create_policy_table(config)


class CacheControlTransport(httpx.AsyncBaseTransport):
    """
    Cache-Control policy transport wrapper for httpx.

    Wraps another transport and sets Cache-Control on its responses unless
    the upstream already sent one.

    Example:
        base = httpx.AsyncHTTPTransport()
        transport = CacheControlTransport(base, config=CacheControlPolicyConfig(
            rules=[("application/json", "no-store")],
            default="no-cache",
        ))
        client = httpx.AsyncClient(transport=transport)
    """

    def __init__(
        self,
        inner: httpx.AsyncBaseTransport,
        *,
        config: Optional[CacheControlPolicyConfig] = None,
        table: Optional[PolicyTable] = None,
        on_applied: Optional[AppliedCallback] = None,
        on_skipped: Optional[SkippedCallback] = None,
    ) -> None:
        """
        Create a new CacheControlTransport.

        Args:
            inner: The wrapped transport to delegate requests to
            config: Policy configuration (default: static asset preset)
            table: Prebuilt policy table
            on_applied: Callback with (content_type, directive) after writing
            on_skipped: Callback with the existing value when the header is kept
        """
        self._inner = inner
        self._table = _resolve_table(config, table)
        self._on_applied = on_applied
        self._on_skipped = on_skipped

    @property
    def table(self) -> PolicyTable:
        return self._table

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Handle an async HTTP request and decorate the response headers."""
        response = await self._inner.handle_async_request(request)
        apply_cache_control(
            response.headers,
            self._table,
            on_applied=self._on_applied,
            on_skipped=self._on_skipped,
        )
        return response

    async def aclose(self) -> None:
        """Close the transport."""
        await self._inner.aclose()


class SyncCacheControlTransport(httpx.BaseTransport):
    """Synchronous Cache-Control policy transport wrapper for httpx."""

    def __init__(
        self,
        inner: httpx.BaseTransport,
        *,
        config: Optional[CacheControlPolicyConfig] = None,
        table: Optional[PolicyTable] = None,
        on_applied: Optional[AppliedCallback] = None,
        on_skipped: Optional[SkippedCallback] = None,
    ) -> None:
        """
        Create a new SyncCacheControlTransport.

        Args:
            inner: The wrapped sync transport to delegate requests to
            config: Policy configuration (default: static asset preset)
            table: Prebuilt policy table
            on_applied: Callback with (content_type, directive) after writing
            on_skipped: Callback with the existing value when the header is kept
        """
        self._inner = inner
        self._table = _resolve_table(config, table)
        self._on_applied = on_applied
        self._on_skipped = on_skipped

    @property
    def table(self) -> PolicyTable:
        return self._table

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Handle a sync HTTP request and decorate the response headers."""
        response = self._inner.handle_request(request)
        apply_cache_control(
            response.headers,
            self._table,
            on_applied=self._on_applied,
            on_skipped=self._on_skipped,
        )
        return response

    def close(self) -> None:
        """Close the transport."""
        self._inner.close()
