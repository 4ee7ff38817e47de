"""
Apply a policy table to a response's headers.
"""
import logging
from typing import MutableMapping, Optional

from .table import PolicyTable
from .types import AppliedCallback, SkippedCallback

logger = logging.getLogger(__name__)

CACHE_CONTROL = "Cache-Control"
CONTENT_TYPE = "Content-Type"


def _get_header(headers: MutableMapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive lookup that also works on plain dicts."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, val in headers.items():
        if key.lower() == lowered:
            return val
    return None


def apply_cache_control(
    headers: MutableMapping[str, str],
    table: PolicyTable,
    *,
    on_applied: Optional[AppliedCallback] = None,
    on_skipped: Optional[SkippedCallback] = None,
) -> Optional[str]:
    """
    Write the table's directive into a response header set.

    An existing Cache-Control header always wins and is left untouched.
    Otherwise the directive for the response's Content-Type (or the
    table default) is written. No other header is modified.

    Args:
        headers: The response headers (Starlette MutableHeaders, httpx.Headers
            or any mutable mapping)
        table: Policy table to resolve against
        on_applied: Callback with (content_type, directive) after writing
        on_skipped: Callback with the existing value when nothing is written

    Returns:
        The directive written, or None if the header was already set
    """
    existing = _get_header(headers, CACHE_CONTROL)
    if existing is not None:
        logger.debug(f"apply_cache_control: keeping existing Cache-Control {existing!r}")
        if on_skipped:
            on_skipped(existing)
        return None

    content_type = _get_header(headers, CONTENT_TYPE)
    directive = table.resolve(content_type)
    headers[CACHE_CONTROL] = directive
    logger.debug(f"apply_cache_control: content_type={content_type!r} -> {directive!r}")

    if on_applied:
        on_applied(content_type, directive)
    return directive
