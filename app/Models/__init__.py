from .Exceptions import ModelException, MissingAccessorException
from .FieldPolicy import FieldPolicy
from .Model import Model

__all__ = [
    "Model",
    "FieldPolicy",
    "ModelException",
    "MissingAccessorException",
]
