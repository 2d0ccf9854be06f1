from __future__ import annotations

from .AttributeCaster import AttributeCaster, JSON_CAST_TYPES, json_default

__all__ = ['AttributeCaster', 'JSON_CAST_TYPES', 'json_default']
