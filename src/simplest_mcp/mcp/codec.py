"""
JSON codec helpers.

Inbound: bytes -> JSON value, then typed accessors that return None (or
MISSING) instead of raising. Outbound: envelope dict -> compact JSON bytes.
"""
import json
import math
from typing import Any, Iterable

JSON_CONTENT_TYPE = "application/json"

# Largest magnitude at which every integer is exactly representable as a float
_EXACT_INT_LIMIT = 2 ** 53


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON literal: {name}")


def decode_text(raw: bytes) -> str:
    """Decode a request body as UTF-8, dropping a leading BOM."""
    return raw.decode("utf-8-sig")


def _parse_int(literal: str) -> int | float:
    try:
        return int(literal)
    except ValueError:
        # Past the interpreter's int digit limit; same value a double parser gives
        return float(literal)


def parse_json(text: str) -> Any:
    """
    Parse strict JSON. Raises ValueError on invalid input and RecursionError
    when nesting is too deep.
    """
    return json.loads(text, parse_constant=_reject_constant, parse_int=_parse_int)


def fold_keys(obj: dict, names: Iterable[str]) -> dict:
    """
    Return a copy of obj where keys matching one of names ignoring case are
    renamed to that canonical spelling. Later keys win on collision.
    """
    canonical = {name.lower(): name for name in names}
    folded = {}
    for key, value in obj.items():
        folded[canonical.get(key.lower(), key)] = value
    return folded


def get_field(obj: dict, name: str) -> Any:
    return obj.get(name, MISSING)


def get_object(value: Any) -> dict | None:
    return value if isinstance(value, dict) else None


def get_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def get_integer(value: Any) -> int | None:
    # bool is a subclass of int but not a JSON integer
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_number(value: Any) -> float | None:
    """Coerce a JSON number to float; None for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _wire_float(value: float) -> Any:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # -0.0 keeps its sign
    if value.is_integer() and abs(value) < _EXACT_INT_LIMIT and (value or math.copysign(1.0, value) > 0):
        return int(value)
    return value


def to_wire(value: Any) -> Any:
    """Make a JSON-compatible tree safe for strict JSON output."""
    if isinstance(value, float):
        return _wire_float(value)
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def encode(payload: Any) -> bytes:
    return json.dumps(
        to_wire(payload),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")
