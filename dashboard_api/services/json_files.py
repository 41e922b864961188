"""Strict JSON file reading shared by the snapshot and layer services."""

from __future__ import annotations

import json
from pathlib import Path
from typing import IO, Any

# Errors a malformed or hostile JSON file can raise while being parsed.
JSON_READ_ERRORS = (OSError, ValueError, RecursionError)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def load_json(fh: IO[str]) -> Any:
    """``json.load`` that rejects ``NaN``, ``Infinity`` and ``-Infinity``."""
    return json.load(fh, parse_constant=_reject_constant)


def read_json_file(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as fh:
        return load_json(fh)
