from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _format_value(value.value)
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Path):
        value = str(value)
    if isinstance(value, str):
        # Quote strings so spaces/symbols stay readable and unambiguous
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return json.dumps(str(value), ensure_ascii=False)


def redact_url(url: str) -> str:
    """Keep scheme/host and the last path segment only.

    Web app deployment URLs embed a long deployment id; logging it in full adds
    noise and leaks the endpoint.
    """
    parts = urlsplit(url or "")
    if not parts.netloc:
        return ""
    tail = parts.path.rstrip("/").rsplit("/", 1)[-1]
    return f"{parts.scheme}://{parts.netloc}/…/{tail}" if tail else f"{parts.scheme}://{parts.netloc}"


def format_kv(**fields: Any) -> str:
    """
    Render a compact single-line key=value log string.

    Example:
      seq=1 event="pull_ok" op="pull" count=12 status="success"
    """
    parts: list[str] = []
    for key, value in fields.items():
        if value is None:
            continue
        parts.append(f"{key}={_format_value(value)}")
    return " ".join(parts)
