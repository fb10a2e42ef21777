"""
Atomic JSON file writing.

Writes go to a temporary file in the target directory which then replaces
the target, so readers never observe a half-written report.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def atomic_write_json(target_path: Path, data: Any) -> None:
    """
    Atomically write ``data`` as indented JSON to ``target_path``.

    Parent directories are created as needed.

    Raises:
        ValueError: If data cannot be serialized to JSON
        OSError: If the file cannot be written or moved into place
    """
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # Serialize first so a bad payload never touches the filesystem
    try:
        json_content = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize data to JSON", error=str(e))
        raise ValueError(f"Cannot serialize data to JSON: {e}") from e

    temp_file_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=target_path.parent,
            prefix=f".{target_path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file_path = Path(temp_file.name)
            temp_file.write(json_content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_file_path, target_path)
        logger.debug("Atomic write completed", target=str(target_path))
    finally:
        if temp_file_path is not None and temp_file_path.exists():
            temp_file_path.unlink()
