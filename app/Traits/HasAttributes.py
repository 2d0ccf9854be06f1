from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Self, Tuple, TYPE_CHECKING

from app.Casts.AttributeCaster import AttributeCaster
from app.Models.Exceptions import MissingAccessorException
from app.Support.Str import Str
from app.Support.Types import is_arrayable

if TYPE_CHECKING:
    from app.Attributes.AccessorMutator import MutatorRegistry
    from app.Models.FieldPolicy import FieldPolicy


class HasAttributes:
    """
    Laravel-style attribute storage with accessors, mutators and casts.

    Reads go through the accessor registered for the attribute, or its
    cast when there is no accessor. Writes go through the mutator, which
    stores the value itself, or are JSON encoded for json-like casts.
    ``attributes_to_array`` builds the filtered, case-converted export.
    """

    __mutators__: ClassVar[MutatorRegistry]
    __snake_attributes__: ClassVar[bool]
    __lc_first__: ClassVar[bool]
    __filter_null_values__: ClassVar[bool]

    _attributes: Dict[str, Any]
    _policy: FieldPolicy

    @property
    def attributes(self) -> Dict[str, Any]:
        """The live attribute store, for mutators that write raw values."""
        return self._attributes

    def get_attributes(self) -> Dict[str, Any]:
        """Get all of the current attributes on the model."""
        return dict(self._attributes)

    def set_raw_attributes(self, attributes: Mapping[str, Any]) -> Self:
        """Replace the attribute store without mutators or casts."""
        self._attributes = dict(attributes)
        return self

    def set_raw_attribute(self, key: str, value: Any) -> None:
        """Store a value as-is."""
        self._attributes[key] = value

    def has_attribute(self, key: str) -> bool:
        """Determine if the key is present in the attribute store."""
        return key in self._attributes

    def unset_attribute(self, key: str) -> None:
        """Remove an attribute from the store."""
        self._attributes.pop(key, None)

    # Accessors and mutators

    def has_get_mutator(self, key: str) -> bool:
        """Determine if a get mutator exists for an attribute."""
        return self.__mutators__.has_accessor(key)

    def has_set_mutator(self, key: str) -> bool:
        """Determine if a set mutator exists for an attribute."""
        return self.__mutators__.has_mutator(key)

    def get_mutated_attributes(self) -> List[str]:
        """Get the export names of every attribute that has an accessor."""
        return [self.case_format(name) for name in self.__mutators__.accessor_names()]

    def mutate_attribute(self, key: str, value: Any) -> Any:
        """Get the value of an attribute using its accessor."""
        if not self.has_get_mutator(key):
            raise MissingAccessorException(type(self).__name__, key)
        return self.__mutators__.get_value(key, self, value)

    def mutate_attribute_for_array(self, key: str, value: Any) -> Any:
        """Get the value of an attribute using its accessor for array conversion."""
        value = self.mutate_attribute(key, value)
        return value.to_array() if is_arrayable(value) else value

    # Casts

    def get_casts(self) -> Dict[str, str]:
        """Get the casts array."""
        return dict(self._policy.casts)

    def has_cast(self, key: str) -> bool:
        """Determine whether an attribute should be cast to a native type."""
        return key in self._policy.casts

    def get_cast_type(self, key: str) -> str:
        """Get the type of cast for a model attribute."""
        return AttributeCaster.normalize(self._policy.casts[key])

    def is_json_castable(self, key: str) -> bool:
        """Determine whether a value is JSON castable for inbound manipulation."""
        return self.has_cast(key) and AttributeCaster.is_json_castable(self._policy.casts[key])

    def cast_attribute(self, key: str, value: Any) -> Any:
        """Cast an attribute to a native Python type."""
        if value is None or not self.has_cast(key):
            return value
        return AttributeCaster.cast(value, self.get_cast_type(key))

    # Reading and writing

    def set_attribute(self, key: str, value: Any) -> None:
        """Set a given attribute on the model."""
        # A mutator owns the write, including storing into the attributes
        if self.has_set_mutator(key):
            self.__mutators__.set_value(key, self, value)
            return

        if self.is_json_castable(key):
            value = AttributeCaster.for_storage(value, self._policy.casts[key])

        self._attributes[key] = value

    def get_attribute(self, key: str) -> Any:
        """Get an attribute from the model, None when it is not present."""
        if key in self._attributes or self.has_get_mutator(key):
            return self.get_attribute_value(key)

        return None

    def find_attribute(self, key: str) -> Tuple[Any, bool]:
        """Get an attribute along with whether it is present at all."""
        if key in self._attributes or self.has_get_mutator(key):
            return self.get_attribute_value(key), True

        return None, False

    def get_attribute_value(self, key: str) -> Any:
        """Get a plain attribute, applying its accessor or cast."""
        value = self.get_attribute_from_array(key)

        # An accessor replaces the cast entirely
        if self.has_get_mutator(key):
            return self.mutate_attribute(key, value)

        if self.has_cast(key):
            value = self.cast_attribute(key, value)

        return value

    def get_attribute_from_array(self, key: str) -> Any:
        """Get an attribute from the attribute store."""
        return self._attributes.get(key)

    # Export

    @classmethod
    def case_format(cls, key: str) -> str:
        """Convert an attribute name to its export form."""
        if cls.__snake_attributes__:
            return Str.snake(key)
        return Str.studly(key, lc_first=cls.__lc_first__)

    def attributes_to_array(self) -> Dict[str, Any]:
        """Convert the model's attributes to a dict."""
        attributes = self.get_arrayable_attributes()
        mutated_attributes = self.get_mutated_attributes()

        for name in self.__mutators__.accessor_names():
            key = self.case_format(name)
            if key not in attributes:
                continue
            attributes[key] = self.mutate_attribute_for_array(name, attributes[key])

        # Attributes handled by an accessor are not cast as well
        for name in self._policy.casts:
            key = self.case_format(name)
            if key not in attributes or key in mutated_attributes:
                continue
            attributes[key] = self.cast_attribute(name, attributes[key])

        # Appended attributes are computed by their accessor alone
        for name in self.get_arrayable_appends():
            attributes[self.case_format(name)] = self.mutate_attribute_for_array(name, None)

        if self.__filter_null_values__:
            return {key: value for key, value in attributes.items() if value is not None}

        return attributes

    def get_arrayable_attributes(self) -> Dict[str, Any]:
        """Get an attribute dict of all arrayable attributes."""
        return self.get_arrayable_items(self._attributes)

    def get_arrayable_appends(self) -> List[str]:
        """Get all of the appendable names that are arrayable."""
        if not self._policy.appends:
            return []

        return list(self.get_arrayable_items({name: name for name in self._policy.appends}).values())

    def get_arrayable_items(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Filter a mapping by visible/hidden and convert its keys to export form."""
        if self._policy.visible:
            visible = set(self._policy.visible)
            items = {key: value for key, value in values.items() if key in visible}
        else:
            hidden = set(self._policy.hidden)
            items = {key: value for key, value in values.items() if key not in hidden}

        return {self.case_format(key): value for key, value in items.items()}
