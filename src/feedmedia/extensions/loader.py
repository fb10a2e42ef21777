"""
Conversion of untyped, JSON-like extension data into typed extension trees.

Upstream feed parsers commonly expose extensions as nested dictionaries::

    {
        "media": {
            "thumbnail": [
                {"name": "thumbnail", "value": "", "attrs": {"url": "...", "width": "120"}, "children": {}}
            ]
        }
    }

``select_namespace`` picks one prefix out of such a map and
``extension_tree_from_dict`` validates the per-prefix part into
``Extension`` values. Keys other than ``value`` and ``attrs`` are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..protocols import Extension, ExtensionTree

logger = logging.getLogger(__name__)


class ExtensionTreeError(ValueError):
    """Raised when extension data cannot be turned into an extension tree."""


class ExtensionModel(BaseModel):
    """Validation model for a single serialized extension occurrence."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    value: str = ""
    attrs: Dict[str, str] = Field(default_factory=dict)


_TREE_ADAPTER: TypeAdapter[Dict[str, List[ExtensionModel]]] = TypeAdapter(Dict[str, List[ExtensionModel]])


def extension_tree_from_dict(data: Mapping[str, Any]) -> ExtensionTree:
    """
    Validate ``data`` and build an extension tree.

    Element names with an empty occurrence list are dropped, so a name is
    either absent or has at least one occurrence.

    Raises:
        ExtensionTreeError: If ``data`` does not have the expected shape.
    """
    try:
        raw_tree = _TREE_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ExtensionTreeError(f"Invalid extension tree: {e}") from e

    tree: Dict[str, List[Extension]] = {}
    for name, occurrences in raw_tree.items():
        if not occurrences:
            continue
        tree[name] = [Extension(value=o.value, attrs=o.attrs) for o in occurrences]
    return tree


def select_namespace(extensions: Optional[Mapping[str, Any]], prefix: str) -> Optional[Mapping[str, Any]]:
    """Return the element map registered under ``prefix``, or ``None``."""
    if extensions is None:
        return None
    selected = extensions.get(prefix)
    if selected is None:
        return None
    if not isinstance(selected, Mapping):
        raise ExtensionTreeError(f"Namespace '{prefix}' is not a mapping")
    return selected


def load_extension_document(path: Path, namespace: Optional[str] = None) -> List[ExtensionTree]:
    """
    Read extension trees from a JSON file.

    The document is either one tree or a list of trees. With ``namespace``
    set, each entry is a namespace-keyed map and the given prefix is
    selected from it; entries without that prefix become empty trees.

    Raises:
        ExtensionTreeError: If the file cannot be read or is not valid.
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ExtensionTreeError(f"Cannot read extension document {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ExtensionTreeError(f"Extension document {path} is not valid JSON: {e}") from e

    entries = document if isinstance(document, list) else [document]
    trees: List[ExtensionTree] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ExtensionTreeError(f"Entry {index} of {path} is not an object")
        if namespace is not None:
            entry = select_namespace(entry, namespace) or {}
        trees.append(extension_tree_from_dict(entry))

    logger.debug("Loaded %d extension tree(s) from %s (namespace=%s)", len(trees), path, namespace)
    return trees
