from __future__ import annotations


class ModelException(Exception):
    """Base exception for models"""
    pass


class MissingAccessorException(ModelException):
    """Exception raised when an attribute needs an accessor that was never registered"""

    def __init__(self, model: str, attribute: str) -> None:
        self.model = model
        self.attribute = attribute

        super().__init__(
            f"Attribute `{attribute}` on model `{model}` has no accessor. "
            f"Appended attributes must be backed by an accessor."
        )
