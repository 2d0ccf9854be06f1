from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Callable, Dict, List, Mapping, Self, TypeVar, TYPE_CHECKING

from app.Log import logger

if TYPE_CHECKING:
    from app.Models.FieldPolicy import FieldPolicy

R = TypeVar('R')

# Mass assignment protection is switched off per execution context
_unguarded: ContextVar[bool] = ContextVar('model_unguarded', default=False)


class GuardsAttributes:
    """
    Laravel-style mass assignment protection.

    Only attributes that pass the fillable/guarded rules are written by
    ``fill``. A model with no fillable attributes and ``['*']`` guarded is
    totally guarded and ignores mass assignment entirely.

    Unguarding is tracked with a context variable, so ``force_fill`` or
    ``Model.unguarded(...)`` in one thread or task never unguards another.
    """

    _policy: FieldPolicy

    def get_fillable(self) -> List[str]:
        """Get the fillable attributes for the model."""
        return list(self._policy.fillable)

    def set_fillable(self, fillable: List[str]) -> Self:
        """Set the fillable attributes for the model."""
        self._policy.fillable = fillable
        return self

    def get_guarded(self) -> List[str]:
        """Get the guarded attributes for the model."""
        return list(self._policy.guarded)

    def set_guarded(self, guarded: List[str]) -> Self:
        """Set the guarded attributes for the model."""
        self._policy.guarded = guarded
        return self

    @classmethod
    def unguard(cls, state: bool = True) -> None:
        """Disable all mass assignable restrictions."""
        _unguarded.set(state)

    @classmethod
    def reguard(cls) -> None:
        """Enable the mass assignment restrictions."""
        _unguarded.set(False)

    @classmethod
    def is_unguarded(cls) -> bool:
        """Determine if current state is "unguarded"."""
        return _unguarded.get()

    @classmethod
    def unguarded(cls, callback: Callable[[], R]) -> R:
        """
        Run the given callable while being unguarded.

        The previous state is restored even when the callback raises.
        """
        if cls.is_unguarded():
            return callback()

        token = _unguarded.set(True)
        try:
            return callback()
        finally:
            _unguarded.reset(token)

    def is_fillable(self, key: str) -> bool:
        """Determine if the given attribute may be mass assigned."""
        if self.is_unguarded():
            return True

        # Keys on the fillable list are always allowed; otherwise fall back
        # to the guarded list, staying open when nothing is fillable.
        if key in self._policy.fillable:
            return True

        if self.is_guarded(key):
            return False

        return not self._policy.fillable

    def is_guarded(self, key: str) -> bool:
        """Determine if the given key is guarded."""
        return key in self._policy.guarded or self._policy.guarded == ['*']

    def totally_guarded(self) -> bool:
        """Determine if the model is totally guarded."""
        return self._policy.is_totally_guarded()

    def fillable_from_array(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """Get the fillable attributes of a given mapping."""
        if self._policy.fillable and not self.is_unguarded():
            fillable = set(self._policy.fillable)
            return {key: value for key, value in attributes.items() if key in fillable}

        return dict(attributes)

    def fill(self, attributes: Mapping[str, Any]) -> Self:
        """Fill the model with a mapping of attributes."""
        totally_guarded = self.totally_guarded()
        assigned: List[str] = []

        for key, value in self.fillable_from_array(attributes).items():
            if totally_guarded:
                break

            if self.is_fillable(key):
                self.set_attribute(key, value)
                assigned.append(key)

        dropped = [key for key in attributes if key not in assigned]
        if dropped:
            logger('model').debug(
                "Mass assignment ignored attributes",
                {'model': type(self).__name__, 'attributes': dropped}
            )

        return self

    def force_fill(self, attributes: Mapping[str, Any]) -> Self:
        """Fill the model with a mapping of attributes. Force mass assignment."""
        return self.unguarded(lambda: self.fill(attributes))

    if TYPE_CHECKING:
        def set_attribute(self, key: str, value: Any) -> None: ...
