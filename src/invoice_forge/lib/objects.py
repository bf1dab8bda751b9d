"""
Object utilities for JSON serialization.

Invoices travel as JSON in share links, the local store and exported
files. Everything funnels through to_json so those payloads stay
byte-for-byte consistent.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any

_COMPACT_SEPARATORS = (",", ":")


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string.

    Dataclasses are converted to dictionaries first. Without an indent the
    output is compact; non-ASCII text is kept as-is rather than escaped.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(
        obj,
        default=_default_serializer,
        indent=indent,
        ensure_ascii=False,
        separators=None if indent is not None else _COMPACT_SEPARATORS,
    )


def from_json(text: str | bytes) -> Any:
    """
    Parse JSON text.

    Thin wrapper so callers share one parsing entry point; json errors
    propagate as ``ValueError`` subclasses.
    """
    return json.loads(text)


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Args:
        obj: Object that json cannot encode natively.

    Returns:
        JSON-serializable representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    return str(obj)
