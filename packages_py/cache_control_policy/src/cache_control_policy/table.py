"""
Cache-Control policy table.

Maps a response content type to a Cache-Control directive using an ordered
list of MIME type rules and a default directive.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .directives import MaxAge, public_max_age, validate_directive
from .mime import parse_mime_type, parse_mime_type_pattern
from .types import (
    CacheControlPolicyConfig,
    CacheControlPolicyError,
    KnownMimeType,
    MimeTypePattern,
    PolicyRule,
)

logger = logging.getLogger(__name__)

RuleSpec = Tuple[Union[str, KnownMimeType, MimeTypePattern], str]

DEFAULT_MAX_AGE_SECONDS = 60 * 60 * 24 * 365

DEFAULT_STATIC_MIME_TYPES: Tuple[KnownMimeType, ...] = (
    KnownMimeType.CSS,
    KnownMimeType.JS,
    KnownMimeType.SVG,
    KnownMimeType.WEBP,
    KnownMimeType.WOFF2,
    KnownMimeType.PNG,
)

DEFAULT_DIRECTIVE = "no-cache"


def static_asset_rules(
    mime_types: Optional[Iterable[Union[str, KnownMimeType]]] = None,
    max_age: Optional[MaxAge] = None,
) -> List[Tuple[str, str]]:
    """
    Build 'public, max-age=N' rules for static asset MIME types.

    Args:
        mime_types: Patterns to cache. Default: DEFAULT_STATIC_MIME_TYPES
        max_age: Lifetime as seconds or timedelta. Default: one year

    Returns:
        Ordered (pattern, directive) pairs

    Raises:
        InvalidMaxAgeError: If max_age is negative or not a number
    """
    if mime_types is None:
        mime_types = DEFAULT_STATIC_MIME_TYPES
    directive = public_max_age(DEFAULT_MAX_AGE_SECONDS if max_age is None else max_age)
    return [
        (m.value if isinstance(m, KnownMimeType) else m, directive)
        for m in mime_types
    ]


DEFAULT_CACHE_CONTROL_POLICY_CONFIG = CacheControlPolicyConfig(
    rules=static_asset_rules(),
    default=DEFAULT_DIRECTIVE,
)


def merge_cache_control_policy_config(
    config: Optional[CacheControlPolicyConfig] = None,
) -> CacheControlPolicyConfig:
    """Merge user config with defaults."""
    if config is None:
        return CacheControlPolicyConfig(
            rules=list(DEFAULT_CACHE_CONTROL_POLICY_CONFIG.rules),
            default=DEFAULT_CACHE_CONTROL_POLICY_CONFIG.default,
        )

    return CacheControlPolicyConfig(
        rules=list(config.rules)
        if config.rules is not None
        else list(DEFAULT_CACHE_CONTROL_POLICY_CONFIG.rules),
        default=config.default
        if config.default is not None
        else DEFAULT_CACHE_CONTROL_POLICY_CONFIG.default,
    )


class PolicyTable:
    """
    Ordered MIME type rules plus a default directive.

    The first rule whose pattern matches the content type wins, so a
    wildcard declared early shadows everything after it. The default is
    not a rule and is only used when nothing matches.

    Tables are immutable once built and safe to share between requests.

    Example:
        table = PolicyTable(
            [("text/html", "no-cache"), ("image/*", "public, max-age=86400")],
            default="no-store",
        )
        table.resolve("image/png")  # 'public, max-age=86400'
    """

    __slots__ = ("_rules", "_default")

    def __init__(self, rules: Sequence[Union[RuleSpec, PolicyRule]] = (), default: str = DEFAULT_DIRECTIVE) -> None:
        """
        Create a new PolicyTable.

        Args:
            rules: Ordered (pattern, directive) pairs or PolicyRule instances
            default: Directive used when no rule matches

        Raises:
            InvalidMimeTypeError: If a pattern cannot be parsed
            InvalidDirectiveError: If a directive is empty or not header-safe
        """
        parsed: List[PolicyRule] = []
        for rule in rules:
            if isinstance(rule, PolicyRule):
                pattern, directive = rule.pattern, rule.directive
            elif isinstance(rule, (tuple, list)) and len(rule) == 2:
                pattern, directive = rule
            else:
                raise CacheControlPolicyError(
                    f"Policy rule must be a (pattern, directive) pair, got {rule!r}"
                )
            parsed.append(
                PolicyRule(
                    pattern=parse_mime_type_pattern(pattern),
                    directive=validate_directive(directive),
                )
            )

        object.__setattr__(self, "_rules", tuple(parsed))
        object.__setattr__(self, "_default", validate_directive(default))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def rules(self) -> Tuple[PolicyRule, ...]:
        return self._rules

    @property
    def default(self) -> str:
        return self._default

    def find_rule(self, content_type: Optional[str]) -> Optional[PolicyRule]:
        """Return the first rule matching the content type, if any."""
        mime_type = parse_mime_type(content_type)
        if mime_type is None:
            return None

        for rule in self._rules:
            if rule.pattern.matches(mime_type):
                return rule
        return None

    def resolve(self, content_type: Optional[str]) -> str:
        """
        Resolve the Cache-Control directive for a content type.

        Missing or malformed content types resolve to the default. Never raises.
        """
        rule = self.find_rule(content_type)
        if rule is None:
            return self._default
        return rule.directive

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        rules = ", ".join(f"{r.pattern}={r.directive!r}" for r in self._rules)
        return f"PolicyTable([{rules}], default={self._default!r})"


def create_policy_table(
    config: Optional[CacheControlPolicyConfig] = None,
) -> PolicyTable:
    """
    Create a policy table from configuration.

    Args:
        config: Policy configuration. Default: static asset preset

    Returns:
        PolicyTable instance
    """
    merged = merge_cache_control_policy_config(config)
    table = PolicyTable(merged.rules, default=merged.default)
    logger.info(f"Created cache control policy table with {len(table)} rules, default={table.default!r}")
    return table
