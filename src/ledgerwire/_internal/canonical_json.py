"""Canonical JSON output for CLI and schema documents.

Encoded models are plain JSON trees, so one serializer covers every
printed payload, report and exported schema.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union


def canonical_dumps(obj: Any, indent: Optional[int] = None) -> str:
    """
    Serialize a JSON tree deterministically.

    Rules:
    - Sorted keys
    - Stable separators (",", ":") when not indented
    - Non-ASCII kept as UTF-8

    Args:
        obj: JSON-compatible Python object (output of encode_model)
        indent: Optional indent for human-facing output

    Returns:
        JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        indent=indent,
        separators=None if indent is not None else (",", ":"),
        ensure_ascii=False,
    )


def load_json(path: Union[str, Path]) -> Any:
    """Read a JSON document from disk."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
