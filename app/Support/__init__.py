from .Str import Str
from .Types import Arrayable, is_arrayable

__all__ = [
    "Str",
    "Arrayable",
    "is_arrayable",
]
