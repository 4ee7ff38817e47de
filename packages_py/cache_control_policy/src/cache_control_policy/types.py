"""
Types for content-type driven Cache-Control policies.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple


WILDCARD = "*"


class CacheControlPolicyError(ValueError):
    """Base exception for cache control policy misconfiguration."""
    pass


class InvalidMimeTypeError(CacheControlPolicyError):
    """Raised when a MIME type pattern cannot be parsed."""
    pass


class InvalidDirectiveError(CacheControlPolicyError):
    """Raised when a Cache-Control directive is not a usable header value."""
    pass


class InvalidMaxAgeError(CacheControlPolicyError):
    """Raised when a max-age value is negative or not a number."""
    pass


class CacheControlConfigError(CacheControlPolicyError):
    """Raised when a policy configuration source fails validation."""
    pass


class KnownMimeType(str, Enum):
    """Well-known MIME types for static assets."""

    CSS = "text/css"
    HTML = "text/html"
    JS = "application/javascript"
    SVG = "image/svg+xml"
    TEXT = "text/plain"
    WEBP = "image/webp"
    WOFF2 = "font/woff2"
    PNG = "image/png"


@dataclass(frozen=True)
class MimeType:
    """A concrete, parsed content type. Parameters are dropped."""

    type: str
    """Top-level type, lower-cased (e.g. 'text')."""

    subtype: str
    """Subtype, lower-cased (e.g. 'html')."""

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    def __str__(self) -> str:
        return self.essence


@dataclass(frozen=True)
class MimeTypePattern:
    """
    A MIME type pattern used as a rule key.

    Either exact ('application/json'), a category wildcard ('image/*')
    or the universal wildcard ('*/*').
    """

    type: str
    """Top-level type or '*'."""

    subtype: str
    """Subtype or '*'."""

    @property
    def is_universal(self) -> bool:
        return self.type == WILDCARD

    @property
    def is_category(self) -> bool:
        return self.type != WILDCARD and self.subtype == WILDCARD

    @property
    def is_exact(self) -> bool:
        return self.subtype != WILDCARD

    def matches(self, mime_type: MimeType) -> bool:
        """Check whether a concrete MIME type falls under this pattern."""
        if self.is_universal:
            return True
        if self.type != mime_type.type:
            return False
        return self.subtype == WILDCARD or self.subtype == mime_type.subtype

    def __str__(self) -> str:
        return f"{self.type}/{self.subtype}"


@dataclass(frozen=True)
class PolicyRule:
    """A single pattern -> directive rule."""

    pattern: MimeTypePattern
    """Pattern the response content type is matched against."""

    directive: str
    """Cache-Control value written when the pattern matches."""


@dataclass
class CacheControlDirectives:
    """Structured Cache-Control directives, rendered by build_cache_control."""

    public: bool = False
    """Response may be stored by shared caches."""

    private: bool = False
    """Response is user-specific."""

    no_cache: bool = False
    """Response must be revalidated before use."""

    no_store: bool = False
    """Response must not be stored."""

    must_revalidate: bool = False
    """Response must be revalidated once stale."""

    proxy_revalidate: bool = False
    """Shared caches must revalidate once stale."""

    no_transform: bool = False
    """Response must not be transformed."""

    immutable: bool = False
    """Response will not change while fresh."""

    max_age: Optional[int] = None
    """Maximum age in seconds."""

    s_maxage: Optional[int] = None
    """Shared cache maximum age in seconds."""

    stale_while_revalidate: Optional[int] = None
    """Seconds a stale response may be served while revalidating."""

    stale_if_error: Optional[int] = None
    """Seconds a stale response may be served on error."""


@dataclass
class CacheControlPolicyConfig:
    """Configuration for a Cache-Control policy table."""

    rules: Optional[List[Tuple[str, str]]] = field(default_factory=list)
    """Ordered (pattern, directive) pairs. First match wins."""

    default: Optional[str] = "no-cache"
    """Directive used when no rule matches or the content type is unreadable."""


AppliedCallback = Callable[[Optional[str], str], None]
"""Called with (content_type, directive) after a directive is written."""

SkippedCallback = Callable[[str], None]
"""Called with the existing Cache-Control value when the header is left alone."""
