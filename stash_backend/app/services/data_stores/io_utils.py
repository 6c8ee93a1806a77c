# stash_backend/app/services/data_stores/io_utils.py
from __future__ import annotations

import json, os, tempfile, shutil
from pathlib import Path
from typing import Any


def atomic_write(path: Path, text: str) -> None:
    """
    Atomic text write: temp file in the same directory, then replace.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding="utf-8") as tf:
        tf.write(text)
        tmp = Path(tf.name)
    try:
        os.replace(tmp, path)   # atomic where supported
    except OSError:
        shutil.move(str(tmp), str(path))

def loads_or(text: str | None, default: Any):
    """Parse a JSON document held by a key-value store; `default` on absent/corrupt."""
    if text is None or not text.strip():
        return default
    try:
        return json.loads(text)
    except ValueError:
        return default

def dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)
