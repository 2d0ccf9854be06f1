"""
Laravel-style model accessors and mutators.

Classes:
- Attribute: Pairs an accessor and a mutator for one attribute
- MutatorRegistry: Per-class table of accessors and mutators

Decorators:
- accessor: Marks a model method as an attribute accessor
- mutator: Marks a model method as an attribute mutator

Examples:
    class User(Model):
        full_name = Attribute.make(
            get=lambda model, value: f"{model.first_name} {model.last_name}"
        )

        @mutator('email')
        def set_email_attribute(self, value):
            self.attributes['email'] = value.lower()
"""

from .AccessorMutator import (
    Attribute,
    MutatorRegistry,
    accessor,
    mutator,
)

__all__ = [
    'Attribute',
    'MutatorRegistry',
    'accessor',
    'mutator',
]
