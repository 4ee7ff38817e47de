"""
MIME type parsing and pattern matching.
"""
import re
from typing import Optional, Union

from .types import (
    WILDCARD,
    InvalidMimeTypeError,
    KnownMimeType,
    MimeType,
    MimeTypePattern,
)


# RFC 7230 token
_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

_EXTENSIONS = {
    "css": KnownMimeType.CSS,
    "html": KnownMimeType.HTML,
    "js": KnownMimeType.JS,
    "svg": KnownMimeType.SVG,
    "webp": KnownMimeType.WEBP,
    "woff2": KnownMimeType.WOFF2,
    "png": KnownMimeType.PNG,
}


def _split_essence(value: str) -> Optional[tuple]:
    """Split 'type/subtype; params' into a lower-cased (type, subtype) pair."""
    essence = value.split(";", 1)[0].strip()
    if essence.count("/") != 1:
        return None

    type_, subtype = (part.lower() for part in essence.split("/"))
    if not _TOKEN.match(type_) or not _TOKEN.match(subtype):
        return None
    return type_, subtype


def parse_mime_type(value: Optional[Union[str, bytes]]) -> Optional[MimeType]:
    """
    Parse a Content-Type header value.

    Parameters such as '; charset=utf-8' are ignored. Returns None for
    absent or malformed values, and for wildcards, which are not concrete
    content types.
    """
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("latin-1")

    parts = _split_essence(value)
    if parts is None:
        return None

    type_, subtype = parts
    if WILDCARD in (type_, subtype):
        return None
    return MimeType(type=type_, subtype=subtype)


def parse_mime_type_pattern(value: Union[str, KnownMimeType, MimeTypePattern]) -> MimeTypePattern:
    """
    Parse a rule pattern string.

    Accepts exact types, 'category/*', '*/*' and the shorthand '*'.

    Raises:
        InvalidMimeTypeError: If the pattern is malformed.
    """
    if isinstance(value, MimeTypePattern):
        return value
    if isinstance(value, KnownMimeType):
        value = value.value
    if not isinstance(value, str):
        raise InvalidMimeTypeError(f"MIME type pattern must be a string, got {type(value).__name__}")

    raw = value.strip()
    if raw == WILDCARD:
        return MimeTypePattern(type=WILDCARD, subtype=WILDCARD)
    if ";" in raw:
        raise InvalidMimeTypeError(f"MIME type pattern must not carry parameters: '{value}'")

    parts = _split_essence(raw)
    if parts is None:
        raise InvalidMimeTypeError(f"Invalid MIME type pattern '{value}'")

    type_, subtype = parts
    if (WILDCARD in type_ and type_ != WILDCARD) or (WILDCARD in subtype and subtype != WILDCARD):
        raise InvalidMimeTypeError(f"Invalid wildcard in MIME type pattern '{value}'")
    if type_ == WILDCARD and subtype != WILDCARD:
        raise InvalidMimeTypeError(f"Wildcard type requires wildcard subtype: '{value}'")

    return MimeTypePattern(type=type_, subtype=subtype)


def mime_type_from_extension(ext: str) -> KnownMimeType:
    """Map a file extension to a well-known MIME type, defaulting to text/plain."""
    return _EXTENSIONS.get(ext.lower().lstrip("."), KnownMimeType.TEXT)
