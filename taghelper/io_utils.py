"""Utility helpers for document IO and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml


def read_document(path: Path) -> Any:
    """Load a YAML or JSON document; ``.json`` files go through the JSON parser."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
