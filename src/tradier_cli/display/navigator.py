"""Total, non-raising accessors over untyped Tradier JSON payloads.

Tradier is not self-describing: a list with one element is usually returned as a
bare object, many fields are omitted depending on account type or order class,
and envelopes change spelling between endpoints. Every helper here degrades to an
empty/zero/absent value instead of raising.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse(data: bytes) -> dict[str, Any] | None:
    try:
        loaded = json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        logger.debug("payload is not valid JSON (%d bytes)", len(data))
        return None
    if not isinstance(loaded, dict):
        logger.debug("payload top level is %s, not an object", type(loaded).__name__)
        return None
    return loaded


def descend(doc: Any, *keys: str) -> dict[str, Any] | None:
    """Walk ``keys`` through nested objects; ``None`` as soon as any hop is not an object."""
    current = doc
    if not isinstance(current, dict):
        return None
    for key in keys:
        current = current.get(key)
        if not isinstance(current, dict):
            return None
    return current


def as_row_set(value: Any) -> list[dict[str, Any]]:
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return []


def maybe_row_set(value: Any) -> list[dict[str, Any]] | None:
    """Like :func:`as_row_set` but keeps "absent" apart from "present and empty"."""
    if not isinstance(value, (dict, list)):
        return None
    return as_row_set(value)


def as_string_sequence(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, bool):
            out.append(_bool_text(item))
        elif isinstance(item, (int, float)):
            out.append(_number_text(item))
    return out


def string_field(doc: Any, key: str) -> str:
    if not isinstance(doc, dict):
        return ""
    value = doc.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return _bool_text(value)
    if isinstance(value, (int, float)):
        return _number_text(value)
    return ""


def number_field(doc: Any, key: str) -> float:
    if not isinstance(doc, dict):
        return 0.0
    value = doc.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def first_present(*candidates: Callable[[], T | None]) -> T | None:
    """Return the first non-``None`` candidate result, evaluating lazily in order."""
    for candidate in candidates:
        result = candidate()
        if result is not None:
            return result
    return None


def display_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return _bool_text(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def pretty_json(data: bytes) -> str:
    """Re-serialize any JSON document with 2-space indentation; ``ValueError`` if invalid."""
    try:
        loaded = json.loads(data, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("JSON document is nested too deeply") from exc
    return json.dumps(loaded, indent=2, ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name!r}")


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _number_text(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return f"{value:.2f}"
