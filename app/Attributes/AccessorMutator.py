from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar, final
import inspect

from app.Support.Str import Str

F = TypeVar('F', bound=Callable[..., Any])

ACCESSOR_MARKER = '__accessor_for__'
MUTATOR_MARKER = '__mutator_for__'

# Class attribute holding (name, Attribute) pairs registered at runtime
REGISTERED_ATTRIBUTES = '__registered_attributes__'


class Attribute:
    """
    Laravel 9+ style Attribute class for defining accessors and mutators.

    An Attribute pairs an optional getter (run when the attribute is read)
    with an optional setter (run when the attribute is written). Callables
    take either ``(value)`` or ``(model, value)``.

    Declared on a model class, an Attribute is also a descriptor, so
    ``user.full_name`` goes through the model's attribute pipeline.

    Usage:
        class User(Model):
            full_name = Attribute.make(
                get=lambda model, value: f"{model.first_name} {model.last_name}",
                set=lambda model, value: model.set_raw_attribute('full_name', value.strip())
            )
    """

    def __init__(
        self,
        get: Optional[Callable[..., Any]] = None,
        set: Optional[Callable[..., Any]] = None,
        method: bool = False
    ):
        """
        Initialize an Attribute instance.

        @param get: Accessor function for getting the attribute value
        @param set: Mutator function for setting the attribute value
        @param method: Whether the callables were declared in a class body,
                       in which case they always receive the model first
        """
        self._get = get
        self._set = set
        self._get_arguments = self._arguments_for(get, method)
        self._set_arguments = self._arguments_for(set, method)
        self.name: Optional[str] = None

    @classmethod
    def make(
        cls,
        get: Optional[Callable[..., Any]] = None,
        set: Optional[Callable[..., Any]] = None
    ) -> 'Attribute':
        """
        Laravel-style factory method for creating Attribute instances.

        @param get: Accessor function
        @param set: Mutator function
        @return: Configured Attribute instance
        """
        return cls(get, set)

    @property
    def has_getter(self) -> bool:
        return self._get is not None

    @property
    def has_setter(self) -> bool:
        return self._set is not None

    def get_value(self, model: Any, raw_value: Any) -> Any:
        """
        Get the transformed attribute value using the accessor.

        @param model: The model instance
        @param raw_value: Raw value from the attribute store
        @return: Transformed value
        """
        if self._get is None:
            return raw_value
        return self._call(self._get, self._get_arguments, model, raw_value)

    def set_value(self, model: Any, value: Any) -> None:
        """
        Hand the value to the mutator, which stores it on the model itself.

        @param model: The model instance
        @param value: Value being set
        """
        if self._set is not None:
            self._call(self._set, self._set_arguments, model, value)

    def merge(self, other: 'Attribute') -> 'Attribute':
        """Combine with another Attribute, preferring the other's callables."""
        merged = Attribute()
        source = other if other._get else self
        merged._get, merged._get_arguments = source._get, source._get_arguments
        source = other if other._set else self
        merged._set, merged._set_arguments = source._set, source._set_arguments
        merged.name = self.name or other.name
        return merged

    @staticmethod
    def _call(func: Callable[..., Any], arguments: Tuple[bool, bool], model: Any, value: Any) -> Any:
        takes_model, takes_value = arguments
        if takes_model and takes_value:
            return func(model, value)
        if takes_model:
            return func(model)
        return func(value)

    @staticmethod
    def _arguments_for(func: Optional[Callable[..., Any]], method: bool) -> Tuple[bool, bool]:
        """
        Work out which of (model, value) a callable is handed.

        Plain callables get the model only when they take two positional
        parameters. Methods always get the model, and the value when they
        declare a parameter for it.

        @param func: Function to inspect
        @param method: Whether the function was declared in a class body
        @return: (pass model, pass value)
        """
        if func is None:
            return (False, False)
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            return (method, True)
        params = [
            param for param in signature.parameters.values()
            if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        ]
        has_varargs = any(param.kind == param.VAR_POSITIONAL for param in signature.parameters.values())
        if method:
            return (True, len(params) >= 2 or has_varargs)
        return (len(params) >= 2, True)

    # Descriptor protocol

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.get_attribute(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.set_attribute(self.name, value)

    def __delete__(self, instance: Any) -> None:
        instance.unset_attribute(self.name)

    def __repr__(self) -> str:
        return f"Attribute(name={self.name!r}, get={self.has_getter}, set={self.has_setter})"


def accessor(name: str) -> Callable[[F], F]:
    """
    Mark a model method as the accessor for an attribute.

    Example:
        @accessor('full_name')
        def get_full_name_attribute(self, value):
            return f"{self.first_name} {self.last_name}"
    """
    def decorator(func: F) -> F:
        setattr(func, ACCESSOR_MARKER, name)
        return func

    return decorator


def mutator(name: str) -> Callable[[F], F]:
    """
    Mark a model method as the mutator for an attribute.

    Example:
        @mutator('email')
        def set_email_attribute(self, value):
            self.attributes['email'] = value.lower()
    """
    def decorator(func: F) -> F:
        setattr(func, MUTATOR_MARKER, name)
        return func

    return decorator


@final
class MutatorRegistry:
    """
    Explicit table of accessors and mutators for one model class.

    Entries are keyed by the camel form of the attribute name, so
    ``full_name`` and ``fullName`` refer to the same entry. A registry is
    built from every class in the MRO, so mixins and base classes
    contribute their entries and subclasses override them. Each class
    contributes its class body first, then anything registered on it at
    runtime.
    """

    def __init__(self) -> None:
        self._attributes: Dict[str, Attribute] = {}
        self._names: Dict[str, str] = {}

    @staticmethod
    def canonical(name: str) -> str:
        """Normalize an attribute name for lookups."""
        return Str.camel(name)

    @classmethod
    def build(cls, model_class: type) -> 'MutatorRegistry':
        """
        Build the registry for a model class.

        @param model_class: The class being created
        @return: The new registry
        """
        registry = cls()
        for klass in reversed(model_class.__mro__):
            if klass is object:
                continue
            registry._collect(klass.__dict__)
            for name, attribute in klass.__dict__.get(REGISTERED_ATTRIBUTES, ()):
                registry.register(name, attribute)
        return registry

    def _collect(self, namespace: Mapping[str, Any]) -> None:
        """Register the Attributes and marked methods of one class body."""
        for member_name, member in namespace.items():
            if isinstance(member, Attribute):
                self.register(member.name or member_name, member)
                continue

            # Static methods are plain callables, everything else is a method
            is_method = not isinstance(member, staticmethod)
            func = member if is_method else member.__func__
            if not callable(func):
                continue
            accessor_for = getattr(func, ACCESSOR_MARKER, None)
            if accessor_for:
                self.register(accessor_for, Attribute(get=func, method=is_method))
            mutator_for = getattr(func, MUTATOR_MARKER, None)
            if mutator_for:
                self.register(mutator_for, Attribute(set=func, method=is_method))

    def register(self, name: str, attribute: Attribute) -> None:
        """Add or extend the entry for an attribute."""
        key = self.canonical(name)
        existing = self._attributes.get(key)
        self._attributes[key] = existing.merge(attribute) if existing else attribute
        self._names.setdefault(key, name)

    def has_accessor(self, name: str) -> bool:
        attribute = self._attributes.get(self.canonical(name))
        return attribute is not None and attribute.has_getter

    def has_mutator(self, name: str) -> bool:
        attribute = self._attributes.get(self.canonical(name))
        return attribute is not None and attribute.has_setter

    def get_value(self, name: str, model: Any, raw_value: Any) -> Any:
        """Run the accessor for an attribute."""
        return self._attributes[self.canonical(name)].get_value(model, raw_value)

    def set_value(self, name: str, model: Any, value: Any) -> None:
        """Run the mutator for an attribute."""
        self._attributes[self.canonical(name)].set_value(model, value)

    def accessor_names(self) -> List[str]:
        """Declared names of every attribute that has an accessor."""
        return [self._names[key] for key, attribute in self._attributes.items() if attribute.has_getter]
