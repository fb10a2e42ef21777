"""
Core data structures for feedmedia.

This module defines the contracts shared by every part of the package:

- ``Extension``: one parsed element occurrence (text value plus attributes)
  as handed over by the upstream feed parser.
- ``ExtensionTree``: occurrences keyed by local element name, in document order.
- ``MediaExtension`` and its nested records: the typed Media RSS metadata
  produced from an extension tree.

All dataclasses are frozen. List-valued fields use tuples and are ``None``
when the feed carried no matching element.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

# ============================================================================
# Input: generic extension tree
# ============================================================================


@dataclass(frozen=True)
class Extension:
    """A single occurrence of an extension element."""

    value: str = ""
    attrs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy into a read-only view so callers cannot mutate the occurrence
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))


ExtensionTree = Mapping[str, Sequence[Extension]]


# ============================================================================
# Output: Media RSS metadata
# ============================================================================


def _omit_empty(mapping: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in mapping.items() if value not in ("", 0, None)}


@dataclass(frozen=True)
class MediaCategory:
    """A ``media:category`` entry."""

    scheme: str = ""
    label: str = ""
    value: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"scheme": self.scheme, "label": self.label, "value": self.value})


@dataclass(frozen=True)
class MediaThumbnail:
    """A ``media:thumbnail`` entry. Width and height are 0 when unknown."""

    url: str = ""
    width: int = 0
    height: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"width": self.width, "height": self.height, "url": self.url})


@dataclass(frozen=True)
class MediaHash:
    """A ``media:hash`` entry."""

    algorithm: str = ""
    hash: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"algo": self.algorithm, "hash": self.hash})


@dataclass(frozen=True)
class MediaExtension:
    """
    Typed metadata for the Media RSS extension of one feed item or channel.

    ``title`` and ``description`` use the empty string for "absent". The
    tuple fields are ``None`` when the tree had no occurrence of the element
    and otherwise hold at least one entry, in document order.
    """

    title: str = ""
    description: str = ""
    keywords: Optional[Tuple[str, ...]] = None
    categories: Optional[Tuple[MediaCategory, ...]] = None
    thumbnails: Optional[Tuple[MediaThumbnail, ...]] = None
    hashes: Optional[Tuple[MediaHash, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize using the upstream feed model's field names.

        Empty strings, zero numbers and ``None`` are omitted. Tuples are
        emitted as lists.
        """
        data: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords) if self.keywords else None,
            "categories": [c.to_dict() for c in self.categories] if self.categories else None,
            "thumbnails": [t.to_dict() for t in self.thumbnails] if self.thumbnails else None,
            "hashes": [h.to_dict() for h in self.hashes] if self.hashes else None,
        }
        return _omit_empty(data)
