"""
Media RSS extension aggregator.

Builds a ``MediaExtension`` from the extension tree of one feed item or
channel by composing the field decoders.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..config import ExtractionSettings
from ..protocols import ExtensionTree, MediaExtension
from .decoders import decode_categories, decode_delimited_list, decode_hashes, decode_text, decode_thumbnails

logger = logging.getLogger(__name__)


class MediaExtensionParser:
    """
    Configurable Media RSS extractor.

    Holds no per-call state, so one instance can be shared between threads.

    Example:
        >>> from feedmedia.protocols import Extension
        >>> parser = MediaExtensionParser()
        >>> tree = {"title": [Extension(value="Launch")]}
        >>> parser.parse(tree).title
        'Launch'
    """

    def __init__(self, config: Optional[ExtractionSettings] = None) -> None:
        self.config = config or ExtractionSettings()

    def parse(self, extensions: Optional[ExtensionTree]) -> MediaExtension:
        """
        Extract media metadata from ``extensions``.

        Never raises for a well-formed tree: missing elements and attributes
        and unparsable numbers all degrade to zero values. A ``None`` tree
        gives an all-empty record.
        """
        media = MediaExtension(
            title=decode_text(extensions, "title"),
            description=decode_text(extensions, "description"),
            keywords=self._keywords(extensions),
            thumbnails=decode_thumbnails(extensions),
            categories=decode_categories(extensions),
            hashes=decode_hashes(extensions),
        )
        logger.debug(
            "Media extension parsed: %d keywords, %d thumbnails, %d categories, %d hashes",
            len(media.keywords or ()),
            len(media.thumbnails or ()),
            len(media.categories or ()),
            len(media.hashes or ()),
        )
        return media

    def _keywords(self, extensions: Optional[ExtensionTree]) -> Optional[Tuple[str, ...]]:
        keywords = decode_delimited_list(extensions, "keywords", self.config.keyword_delimiter)
        if keywords is None or not self.config.drop_empty_keywords:
            return keywords
        return tuple(k for k in keywords if k) or None


_default_parser = MediaExtensionParser()


def build_media_metadata(extensions: Optional[ExtensionTree]) -> MediaExtension:
    """Extract media metadata with default settings (keywords split on ``","``)."""
    return _default_parser.parse(extensions)
