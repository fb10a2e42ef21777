"""
Extension tree lookups.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..protocols import Extension, ExtensionTree


def lookup(extensions: Optional[ExtensionTree], name: str) -> Sequence[Extension]:
    """
    Return the occurrences registered under ``name``.

    A ``None`` tree or a missing name yields an empty sequence; absence is a
    normal outcome and never raises.
    """
    if extensions is None:
        return ()
    return extensions.get(name) or ()
