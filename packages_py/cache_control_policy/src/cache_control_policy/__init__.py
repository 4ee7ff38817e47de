"""
Content-type driven Cache-Control policies.

Resolves a Cache-Control directive from a response's Content-Type using an
ordered rule table and writes it unless the response already carries one.
"""
from .types import (
    WILDCARD,
    CacheControlPolicyError,
    InvalidMimeTypeError,
    InvalidDirectiveError,
    InvalidMaxAgeError,
    CacheControlConfigError,
    KnownMimeType,
    MimeType,
    MimeTypePattern,
    PolicyRule,
    CacheControlDirectives,
    CacheControlPolicyConfig,
    AppliedCallback,
    SkippedCallback,
)
from .mime import (
    parse_mime_type,
    parse_mime_type_pattern,
    mime_type_from_extension,
)
from .directives import (
    validate_directive,
    max_age_seconds,
    build_cache_control,
    public_max_age,
)
from .table import (
    PolicyTable,
    create_policy_table,
    static_asset_rules,
    merge_cache_control_policy_config,
    DEFAULT_CACHE_CONTROL_POLICY_CONFIG,
    DEFAULT_STATIC_MIME_TYPES,
    DEFAULT_MAX_AGE_SECONDS,
    DEFAULT_DIRECTIVE,
)
from .decorator import (
    apply_cache_control,
    CACHE_CONTROL,
    CONTENT_TYPE,
)
from .config import (
    CacheControlRuleModel,
    CacheControlPolicyModel,
    load_policy_config,
    load_policy_config_from_yaml,
)


__all__ = [
    # Types
    "WILDCARD",
    "CacheControlPolicyError",
    "InvalidMimeTypeError",
    "InvalidDirectiveError",
    "InvalidMaxAgeError",
    "CacheControlConfigError",
    "KnownMimeType",
    "MimeType",
    "MimeTypePattern",
    "PolicyRule",
    "CacheControlDirectives",
    "CacheControlPolicyConfig",
    "AppliedCallback",
    "SkippedCallback",
    # MIME utilities
    "parse_mime_type",
    "parse_mime_type_pattern",
    "mime_type_from_extension",
    # Directive utilities
    "validate_directive",
    "max_age_seconds",
    "build_cache_control",
    "public_max_age",
    # Policy table
    "PolicyTable",
    "create_policy_table",
    "static_asset_rules",
    "merge_cache_control_policy_config",
    "DEFAULT_CACHE_CONTROL_POLICY_CONFIG",
    "DEFAULT_STATIC_MIME_TYPES",
    "DEFAULT_MAX_AGE_SECONDS",
    "DEFAULT_DIRECTIVE",
    # Header decorator
    "apply_cache_control",
    "CACHE_CONTROL",
    "CONTENT_TYPE",
    # Config loading
    "CacheControlRuleModel",
    "CacheControlPolicyModel",
    "load_policy_config",
    "load_policy_config_from_yaml",
]

__version__ = "1.0.0"
