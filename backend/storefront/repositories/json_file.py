"""
Whole-document JSON file access shared by the repositories

Every mutation rewrites the full document. Writes go to a temp file in the
same directory and are moved into place with os.replace, so readers never
see a half-written file. lock_for(path) hands out one lock per resolved
path for read-modify-write sequences inside this process.

Author: TM3
Date: 2026-10-19
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

_locks: Dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


def lock_for(path: Path) -> threading.RLock:
    key = str(Path(path).resolve())
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]


def read_json_list(path: Path) -> List[Any]:
    """Read a JSON array; a missing file reads as an empty list"""
    path = Path(path)
    if not path.exists():
        return []

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a JSON array")
    return data


def write_json_list(path: Path, data: List[Any]) -> None:
    """Atomically replace the file with an indented JSON array"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.debug(f"Wrote {len(data)} records to {path}")
