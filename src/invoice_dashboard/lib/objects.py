"""
Object utilities for hashing and JSON serialization.

Used to fingerprint filter settings and to log service payloads.
"""

import hashlib
import json
import math
from dataclasses import asdict, is_dataclass
from typing import Any


class HashResult:
    """Wrapper around a SHA-256 digest exposing hexdigest()."""

    def __init__(self, data: bytes) -> None:
        self._hash = hashlib.sha256(data)

    def hexdigest(self) -> str:
        """Return the hexadecimal digest of the hash."""
        return self._hash.hexdigest()


def hash(obj: Any) -> HashResult:
    """
    Create a stable hash of an object or list of objects.

    Objects are serialized to JSON with sorted keys before hashing so the
    same value always produces the same digest.

    Args:
        obj: Any JSON-serializable object, dataclass, or list of them.

    Returns:
        HashResult instance with hexdigest() method.
    """
    json_str = json.dumps(obj, sort_keys=True, default=_default_serializer)
    return HashResult(json_str.encode("utf-8"))


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string.

    Dataclasses are converted to dictionaries first and non-finite floats
    are written as null. Falls back to str() for anything else.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(_finite(obj), default=_default_serializer, indent=indent, ensure_ascii=False)


def _finite(obj: Any) -> Any:
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {key: _finite(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_finite(value) for value in obj]
    return obj


def _default_serializer(obj: Any) -> Any:
    """Default serializer for types json cannot encode natively."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    return str(obj)
