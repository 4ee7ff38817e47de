"""
Cache-Control policy transport wrapper for httpx's compose pattern.

Sets Cache-Control on responses by content type, keeping any value the
upstream already sent.
"""
from cache_control_policy import (
    CacheControlPolicyConfig,
    PolicyTable,
    create_policy_table,
)
from .transport import CacheControlTransport, SyncCacheControlTransport
from .factory import (
    compose_transport,
    compose_sync_transport,
    create_cache_control_transport,
    create_cache_control_sync_transport,
    create_cache_control_client,
    create_cache_control_sync_client,
)


__all__ = [
    # Re-exported types from base package
    "CacheControlPolicyConfig",
    "PolicyTable",
    "create_policy_table",
    # Transport wrappers
    "CacheControlTransport",
    "SyncCacheControlTransport",
    # Factory functions
    "compose_transport",
    "compose_sync_transport",
    "create_cache_control_transport",
    "create_cache_control_sync_transport",
    "create_cache_control_client",
    "create_cache_control_sync_client",
]

__version__ = "1.0.0"
