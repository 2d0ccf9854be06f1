"""
Support contracts for model attributes.

The Arrayable protocol marks values that export themselves as a dict,
such as accessor results and cast objects embedded in model arrays.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeGuard, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Arrayable(Protocol[T]):
    """Protocol for objects that can be converted to arrays."""

    def to_array(self) -> dict[str, T]:
        """Convert to array representation."""
        ...


def is_arrayable(obj: Any) -> TypeGuard[Arrayable[Any]]:
    """Type guard to check if object implements Arrayable protocol."""
    return hasattr(obj, "to_array") and callable(obj.to_array)


__all__ = [
    "Arrayable",
    "is_arrayable",
]
