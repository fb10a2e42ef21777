"""
feedmedia extension decoding.

Components:
- lookup: occurrence lookup in an extension tree
- decoders: scalar, delimited-list and record-list field decoders
- MediaExtensionParser / build_media_metadata: Media RSS aggregator
- loader: JSON-like data to typed extension trees
"""

from .decoders import (
    attr,
    decode_categories,
    decode_delimited_list,
    decode_hashes,
    decode_records,
    decode_text,
    decode_thumbnails,
    int_attr,
    parse_int,
)
from .loader import ExtensionTreeError, extension_tree_from_dict, load_extension_document, select_namespace
from .media import MediaExtensionParser, build_media_metadata
from .reader import lookup

__all__ = [
    # Aggregator
    "MediaExtensionParser",
    "build_media_metadata",
    # Reader and decoders
    "lookup",
    "decode_text",
    "decode_delimited_list",
    "decode_records",
    "decode_categories",
    "decode_thumbnails",
    "decode_hashes",
    # Coercion helpers
    "attr",
    "int_attr",
    "parse_int",
    # Loading
    "ExtensionTreeError",
    "extension_tree_from_dict",
    "load_extension_document",
    "select_namespace",
]
