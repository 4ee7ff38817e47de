"""
Cache-Control directive validation and building.

Directives are treated as opaque header values. Validation only ensures
they can be written into a response header.
"""
import math
import re
from datetime import timedelta
from typing import List, Union

from .types import CacheControlDirectives, InvalidDirectiveError, InvalidMaxAgeError


# Visible ASCII plus space and horizontal tab
_HEADER_VALUE = re.compile(r"^[\x20-\x7e\t]+$")

MaxAge = Union[int, float, timedelta]


def validate_directive(directive: str) -> str:
    """
    Validate a Cache-Control directive and return it stripped.

    Raises:
        InvalidDirectiveError: If the directive is empty, not a string, or
            contains characters that are not allowed in a header value.
    """
    if not isinstance(directive, str):
        raise InvalidDirectiveError(
            f"Cache-Control directive must be a string, got {type(directive).__name__}"
        )

    value = directive.strip()
    if not value:
        raise InvalidDirectiveError("Cache-Control directive must not be empty")
    if not _HEADER_VALUE.match(value):
        raise InvalidDirectiveError(
            f"Cache-Control directive contains invalid characters: {directive!r}"
        )
    return value


def max_age_seconds(max_age: MaxAge) -> int:
    """
    Convert a max-age value to whole seconds.

    Raises:
        InvalidMaxAgeError: If the value is negative or not a number.
    """
    if isinstance(max_age, timedelta):
        seconds = max_age.total_seconds()
    elif isinstance(max_age, (int, float)) and not isinstance(max_age, bool):
        seconds = max_age
    else:
        raise InvalidMaxAgeError(f"Invalid max-age value: {max_age!r}")

    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidMaxAgeError(f"Invalid max-age value: {max_age!r}")
    return int(seconds)


def build_cache_control(directives: CacheControlDirectives) -> str:
    """Build a Cache-Control header value from structured directives."""
    parts: List[str] = []

    if directives.public:
        parts.append("public")
    if directives.private:
        parts.append("private")
    if directives.no_store:
        parts.append("no-store")
    if directives.no_cache:
        parts.append("no-cache")
    if directives.must_revalidate:
        parts.append("must-revalidate")
    if directives.proxy_revalidate:
        parts.append("proxy-revalidate")
    if directives.no_transform:
        parts.append("no-transform")
    if directives.max_age is not None:
        parts.append(f"max-age={max_age_seconds(directives.max_age)}")
    if directives.s_maxage is not None:
        parts.append(f"s-maxage={max_age_seconds(directives.s_maxage)}")
    if directives.stale_while_revalidate is not None:
        parts.append(
            f"stale-while-revalidate={max_age_seconds(directives.stale_while_revalidate)}"
        )
    if directives.stale_if_error is not None:
        parts.append(f"stale-if-error={max_age_seconds(directives.stale_if_error)}")
    if directives.immutable:
        parts.append("immutable")

    return ", ".join(parts)


def public_max_age(max_age: MaxAge) -> str:
    """Shorthand for 'public, max-age=<seconds>'."""
    return build_cache_control(
        CacheControlDirectives(public=True, max_age=max_age_seconds(max_age))
    )
