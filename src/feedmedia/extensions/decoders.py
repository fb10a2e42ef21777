"""
Field decoders for extension trees.

Each decoder fetches raw occurrences through ``lookup`` and turns them into
typed values. Decoders never raise on malformed feed data: a missing element
gives the zero value, a missing attribute leaves the field empty and a
number that does not parse becomes 0.

Policies worth knowing before changing anything here:

- Scalar text is first-wins. ``decode_text`` returns the first occurrence's
  text and ignores the rest.
- ``decode_delimited_list`` keeps empty pieces, so a present but empty text
  decodes to ``("",)``.
- Record lists are ``None`` when there are no occurrences, never ``()``.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Tuple, TypeVar

from ..protocols import Extension, ExtensionTree, MediaCategory, MediaHash, MediaThumbnail
from .reader import lookup

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Optional sign followed by ASCII digits; no whitespace or underscores
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# ============================================================================
# Coercion helpers
# ============================================================================


def attr(extension: Extension, key: str) -> str:
    """Return attribute ``key`` verbatim, or an empty string when missing."""
    return extension.attrs.get(key, "")


def parse_int(text: str) -> Tuple[int, bool]:
    """
    Parse ``text`` as a base-10 integer.

    Returns ``(value, True)`` on success and ``(0, False)`` otherwise. The
    caller decides what to do with the flag; the record decoders discard it.
    """
    if not INTEGER_PATTERN.fullmatch(text):
        return 0, False
    return int(text), True


def int_attr(extension: Extension, key: str) -> int:
    """Integer value of attribute ``key``; 0 when missing or malformed."""
    raw = extension.attrs.get(key)
    if raw is None:
        return 0
    value, ok = parse_int(raw)
    if not ok:
        logger.debug("Ignoring non-integer attribute %s=%r", key, raw)
    return value


# ============================================================================
# Scalar decoders
# ============================================================================


def decode_text(extensions: Optional[ExtensionTree], name: str) -> str:
    """
    Text of the first occurrence of ``name``, or ``""`` if there is none.

    Later occurrences are ignored on purpose (first-wins). Do not turn this
    into an aggregation over all occurrences.
    """
    matches = lookup(extensions, name)
    if not matches:
        return ""
    return matches[0].value


def decode_delimited_list(
    extensions: Optional[ExtensionTree], name: str, delimiter: str
) -> Optional[Tuple[str, ...]]:
    """
    Split the first occurrence's text on ``delimiter`` and trim every piece.

    Empty pieces are kept, so ``"a,,b"`` gives ``("a", "", "b")`` and an
    empty text gives ``("",)``. Returns ``None`` when ``name`` is absent.

    Raises:
        ValueError: If ``delimiter`` is empty.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not lookup(extensions, name):
        return None
    raw = decode_text(extensions, name)
    return tuple(piece.strip() for piece in raw.split(delimiter))


# ============================================================================
# Record list decoders
# ============================================================================


def decode_records(
    extensions: Optional[ExtensionTree], name: str, project: Callable[[Extension], T]
) -> Optional[Tuple[T, ...]]:
    """
    Project every occurrence of ``name`` into a record, in document order.

    Returns ``None`` when there are no occurrences.
    """
    matches = lookup(extensions, name)
    if not matches:
        return None
    return tuple(project(extension) for extension in matches)


def category_from_extension(extension: Extension) -> MediaCategory:
    return MediaCategory(
        scheme=attr(extension, "scheme"),
        label=attr(extension, "label"),
        value=extension.value,
    )


def thumbnail_from_extension(extension: Extension) -> MediaThumbnail:
    return MediaThumbnail(
        url=attr(extension, "url"),
        width=int_attr(extension, "width"),
        height=int_attr(extension, "height"),
    )


def hash_from_extension(extension: Extension) -> MediaHash:
    return MediaHash(algorithm=attr(extension, "algo"), hash=extension.value)


def decode_categories(extensions: Optional[ExtensionTree]) -> Optional[Tuple[MediaCategory, ...]]:
    """Decode ``category`` occurrences (scheme/label attributes, text value)."""
    return decode_records(extensions, "category", category_from_extension)


def decode_thumbnails(extensions: Optional[ExtensionTree]) -> Optional[Tuple[MediaThumbnail, ...]]:
    """Decode ``thumbnail`` occurrences (url, width and height attributes)."""
    return decode_records(extensions, "thumbnail", thumbnail_from_extension)


def decode_hashes(extensions: Optional[ExtensionTree]) -> Optional[Tuple[MediaHash, ...]]:
    """Decode ``hash`` occurrences (algo attribute, text hash)."""
    return decode_records(extensions, "hash", hash_from_extension)
