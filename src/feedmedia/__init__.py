"""
feedmedia - Typed Media RSS metadata from parsed feed extension trees.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .extensions import MediaExtensionParser, build_media_metadata
from .protocols import Extension, ExtensionTree, MediaCategory, MediaExtension, MediaHash, MediaThumbnail

__all__ = [
    "__version__",
    "Extension",
    "ExtensionTree",
    "MediaCategory",
    "MediaExtension",
    "MediaExtensionParser",
    "MediaHash",
    "MediaThumbnail",
    "build_media_metadata",
]
