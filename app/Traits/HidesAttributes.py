from __future__ import annotations

from typing import List, Self, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from app.Models.FieldPolicy import FieldPolicy


def _names(attributes: tuple[Union[str, List[str]], ...]) -> List[str]:
    """Accept either a single list of names or the names as arguments."""
    if len(attributes) == 1 and isinstance(attributes[0], (list, tuple)):
        return list(attributes[0])
    return [name for name in attributes if isinstance(name, str)]


class HidesAttributes:
    """Laravel-style control over which attributes reach arrays and JSON."""

    _policy: FieldPolicy

    def get_hidden(self) -> List[str]:
        """Get the hidden attributes for the model."""
        return list(self._policy.hidden)

    def set_hidden(self, hidden: List[str]) -> Self:
        """Set the hidden attributes for the model."""
        self._policy.hidden = hidden
        return self

    def add_hidden(self, *attributes: Union[str, List[str]]) -> Self:
        """Add hidden attributes for the model."""
        self._policy.hidden = self._policy.hidden + _names(attributes)
        return self

    def get_visible(self) -> List[str]:
        """Get the visible attributes for the model."""
        return list(self._policy.visible)

    def set_visible(self, visible: List[str]) -> Self:
        """Set the visible attributes for the model."""
        self._policy.visible = visible
        return self

    def add_visible(self, *attributes: Union[str, List[str]]) -> Self:
        """Add visible attributes for the model."""
        self._policy.visible = self._policy.visible + _names(attributes)
        return self

    def get_appends(self) -> List[str]:
        """Get the accessors appended to the model's array form."""
        return list(self._policy.appends)

    def set_appends(self, appends: List[str]) -> Self:
        """Set the accessors to append to model arrays."""
        self._policy.appends = appends
        return self
