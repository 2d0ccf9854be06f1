from __future__ import annotations

import json
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Self, Set

from app.Attributes.AccessorMutator import REGISTERED_ATTRIBUTES, Attribute, MutatorRegistry
from app.Casts.AttributeCaster import json_default
from app.Log import logger
from app.Models.FieldPolicy import FieldPolicy
from app.Support.Str import Str
from app.Traits.GuardsAttributes import GuardsAttributes
from app.Traits.HasAttributes import HasAttributes
from app.Traits.HidesAttributes import HidesAttributes
from config.model import model_settings


class Model(GuardsAttributes, HasAttributes, HidesAttributes):
    """
    Laravel-style attribute model.

    A model stores a free-form mapping of attributes and shapes how they are
    written (mass assignment guards, mutators, JSON casts), read (accessors,
    casts) and exported (hidden/visible/appends, case conversion, null
    filtering).

    Example:
        class User(Model):
            __fillable__ = ['first_name', 'last_name', 'email']
            __hidden__ = ['password']
            __casts__ = {'is_admin': 'boolean'}
            __appends__ = ['full_name']

            @accessor('full_name')
            def get_full_name_attribute(self, value):
                return f"{self.first_name} {self.last_name}"

        User({'first_name': 'Ada', 'last_name': 'Lovelace'}).to_array()
        # {'first_name': 'Ada', 'last_name': 'Lovelace', 'full_name': 'Ada Lovelace'}
    """

    # Laravel-style fillable/guarded/hidden attributes
    __fillable__: ClassVar[List[str]] = []
    __guarded__: ClassVar[List[str]] = []
    __hidden__: ClassVar[List[str]] = []
    __visible__: ClassVar[List[str]] = []
    __appends__: ClassVar[List[str]] = []
    __casts__: ClassVar[Dict[str, str]] = {}

    # Export settings
    __snake_attributes__: ClassVar[bool] = model_settings.snake_attributes
    __lc_first__: ClassVar[bool] = model_settings.lc_first
    __filter_null_values__: ClassVar[bool] = model_settings.filter_null_values

    __mutators__: ClassVar[MutatorRegistry] = MutatorRegistry()

    # Model classes that have already been booted
    _booted: ClassVar[Set[type]] = set()

    # Models are not iterable
    __iter__ = None  # type: ignore[assignment]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__mutators__ = MutatorRegistry.build(cls)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._attributes = {}
        self._policy = FieldPolicy.from_model_class(type(self))

        self._boot_if_not_booted()

        self.fill({**(attributes or {}), **kwargs})

    def _boot_if_not_booted(self) -> None:
        """Check if the model needs to be booted and if so, do it."""
        cls = type(self)
        if cls not in Model._booted:
            Model._booted.add(cls)
            cls.boot()

    @classmethod
    def boot(cls) -> None:
        """The "booting" method of the model."""
        cls.boot_traits()
        logger('model').debug("Booted model", {'model': cls.__name__})

    @classmethod
    def boot_traits(cls) -> None:
        """Call the boot_<mixin> hook of every mixin the model uses."""
        called: Set[str] = set()
        for base in reversed(cls.__mro__[1:]):
            if base is object:
                continue
            method = f"boot_{Str.snake(base.__name__)}"
            hook: Optional[Callable[[], None]] = getattr(cls, method, None)
            if method in called or not callable(hook):
                continue
            called.add(method)
            hook()

    @classmethod
    def register_accessor(cls, name: str, get: Callable[..., Any]) -> None:
        """Register an accessor for an attribute on this model class and its subclasses."""
        cls._register_attribute(name, Attribute(get=get))

    @classmethod
    def register_mutator(cls, name: str, set: Callable[..., Any]) -> None:
        """Register a mutator for an attribute on this model class and its subclasses."""
        cls._register_attribute(name, Attribute(set=set))

    @classmethod
    def _register_attribute(cls, name: str, attribute: Attribute) -> None:
        if REGISTERED_ATTRIBUTES not in cls.__dict__:
            setattr(cls, REGISTERED_ATTRIBUTES, [])
        getattr(cls, REGISTERED_ATTRIBUTES).append((name, attribute))

        # Subclasses built their registries from this class already
        pending: List[type[Model]] = [cls]
        while pending:
            klass = pending.pop()
            klass.__mutators__ = MutatorRegistry.build(klass)
            pending.extend(klass.__subclasses__())

    def get_name(self) -> str:
        """Get the name of the concrete model."""
        return Str.class_basename(self)

    def new_instance(self, attributes: Optional[Mapping[str, Any]] = None) -> Self:
        """Create a new instance of the given model."""
        return type(self)(dict(attributes or {}))

    def replicate(self) -> Self:
        """Clone the model into a new instance with the same raw attributes."""
        return type(self)().set_raw_attributes(self._attributes)

    def clean(self) -> Self:
        """Replicate the model with empty attribute filters."""
        instance = self.replicate()
        instance.set_visible([])
        instance.set_hidden([])
        instance.set_appends([])
        return instance

    # Array and JSON conversion

    def to_array(self) -> Dict[str, Any]:
        """Convert the model instance to a dict."""
        return self.attributes_to_array()

    def to_json(self, **options: Any) -> str:
        """Convert the model instance to JSON."""
        options.setdefault('default', json_default)
        return json.dumps(self.to_array(), **options)

    def offset_exists(self, key: str) -> bool:
        """Determine if an attribute is set and not None."""
        if self._attributes.get(key) is not None:
            return True
        return self.has_get_mutator(key) and self.get_attribute_value(key) is not None

    # Dynamic attribute access

    def __getattr__(self, key: str) -> Any:
        # Only reached when normal lookup fails
        if key.startswith('_'):
            raise AttributeError(key)
        return self.get_attribute(key)

    def __setattr__(self, key: str, value: Any) -> None:
        if key.startswith('_') or hasattr(type(self), key):
            object.__setattr__(self, key, value)
            return
        self.set_attribute(key, value)

    def __delattr__(self, key: str) -> None:
        if key.startswith('_') or hasattr(type(self), key):
            object.__delattr__(self, key)
            return
        self.unset_attribute(key)

    def __getitem__(self, key: str) -> Any:
        return self.get_attribute(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_attribute(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset_attribute(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.offset_exists(key)

    def __setstate__(self, state: Dict[str, Any]) -> None:
        # Unpickled models boot their class like freshly constructed ones
        self.__dict__.update(state)
        self._boot_if_not_booted()

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"<{self.get_name()} {self._attributes!r}>"
