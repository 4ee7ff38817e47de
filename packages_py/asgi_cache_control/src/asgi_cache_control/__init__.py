"""
ASGI integration for content-type driven Cache-Control policies.

Works with Starlette, FastAPI and any other ASGI application.
"""
from cache_control_policy import (
    CacheControlPolicyConfig,
    PolicyTable,
    create_policy_table,
    load_policy_config,
    load_policy_config_from_yaml,
)
from .middleware import CacheControlMiddleware
from .factory import (
    create_cache_control_middleware,
    add_cache_control_middleware,
)


__all__ = [
    # Re-exported from base package
    "CacheControlPolicyConfig",
    "PolicyTable",
    "create_policy_table",
    "load_policy_config",
    "load_policy_config_from_yaml",
    # Middleware
    "CacheControlMiddleware",
    # Factory functions
    "create_cache_control_middleware",
    "add_cache_control_middleware",
]

__version__ = "1.0.0"
