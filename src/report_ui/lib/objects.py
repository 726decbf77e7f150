"""
Object utilities for stable hashing and JSON serialization.

Request cache keys are built from the backend scope, the endpoint path and
its cleaned query parameters; serializing them with sorted keys makes the key independent of
filter insertion order.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from datetime import date
from typing import Any


def stable_hash(obj: Any) -> str:
    """
    Return a SHA-256 hex digest of obj serialized as sorted-key JSON.

    Args:
        obj: Any JSON-serializable object, dataclass or list of them.

    Returns:
        Hexadecimal digest string.
    """
    payload = json.dumps(obj, sort_keys=True, default=_default_serializer)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def request_key(path: str, params: dict[str, Any], scope: str = "") -> str:
    """
    Build the cache key for a GET request.

    Args:
        path: Endpoint path.
        params: Cleaned query parameters.
        scope: Backend identity (base URL and credentials digest) so responses
            from different backends never share an entry.
    """
    return stable_hash([scope, path, params])


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a JSON string.

    Dataclasses are converted to dictionaries and dates to ISO strings.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent)


def _default_serializer(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
