from __future__ import annotations

import json
import re
from types import SimpleNamespace
from typing import Any, Callable, Dict, Optional

from app.Log import logger

# Cast kinds whose values are stored as JSON text
JSON_CAST_TYPES = ('array', 'json', 'object')

_NUMERIC_PREFIX = re.compile(r'\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')


def _leading_number(value: str) -> float:
    """Parse the numeric prefix of a string, 0 when there is none."""
    match = _NUMERIC_PREFIX.match(value)
    return float(match.group(0)) if match else 0.0


def to_int(value: Any) -> int:
    if isinstance(value, str):
        stripped = value.strip()
        if re.fullmatch(r'[+-]?\d+', stripped):
            return int(stripped)
        return int(_leading_number(value))
    if isinstance(value, (list, tuple, dict, set)):
        return 1 if value else 0
    return int(value)


def to_float(value: Any) -> float:
    if isinstance(value, str):
        return _leading_number(value)
    if isinstance(value, (list, tuple, dict, set)):
        return 1.0 if value else 0.0
    return float(value)


def to_string(value: Any) -> str:
    # Bools and whole floats print like their integer forms
    if isinstance(value, bool):
        return '1' if value else ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value not in ('', '0')
    return bool(value)


def decode_json(value: Any) -> Any:
    """Transform JSON text to dicts and lists."""
    if isinstance(value, (str, bytes, bytearray)):
        return json.loads(value)
    return value


def decode_json_object(value: Any) -> Any:
    """Transform JSON text to objects with attribute access."""
    if isinstance(value, (str, bytes, bytearray)):
        return json.loads(value, object_hook=lambda data: SimpleNamespace(**data))
    return value


def encode_json(value: Any) -> str:
    """Transform a Python value to JSON text for storage."""
    return json.dumps(value, default=json_default)


def json_default(value: Any) -> Any:
    """Serialize values the json module does not know about."""
    if hasattr(value, 'to_array') and callable(value.to_array):
        return value.to_array()
    if isinstance(value, SimpleNamespace):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class AttributeCaster:
    """Casts attribute values to native types by cast kind."""

    cast_map: Dict[str, Callable[[Any], Any]] = {
        'int': to_int,
        'integer': to_int,
        'real': to_float,
        'float': to_float,
        'double': to_float,
        'string': to_string,
        'bool': to_bool,
        'boolean': to_bool,
        'object': decode_json_object,
        'array': decode_json,
        'json': decode_json,
    }

    @staticmethod
    def normalize(cast_type: Optional[str]) -> str:
        """Normalize a declared cast kind."""
        return (cast_type or '').strip().lower()

    @classmethod
    def is_json_castable(cls, cast_type: Optional[str]) -> bool:
        return cls.normalize(cast_type) in JSON_CAST_TYPES

    @classmethod
    def cast(cls, value: Any, cast_type: Optional[str]) -> Any:
        """
        Cast a value to the native type named by the cast kind.

        None passes through and unknown kinds return the value unchanged.
        JSON decode errors propagate to the caller.
        """
        if value is None:
            return None

        kind = cls.normalize(cast_type)
        caster = cls.cast_map.get(kind)
        if caster is None:
            logger('model').debug("Unknown cast type, value left unchanged", {'cast': cast_type})
            return value

        return caster(value)

    @classmethod
    def for_storage(cls, value: Any, cast_type: Optional[str]) -> Any:
        """Prepare a value for the attribute store."""
        if cls.is_json_castable(cast_type):
            return encode_json(value)
        return value
