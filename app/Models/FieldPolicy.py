from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldPolicy(BaseModel):
    """
    Mass assignment, visibility and cast rules for one model instance.

    Each model class declares its defaults as dunder class variables; every
    instance gets its own validated copy so instance setters never leak into
    the class declaration.
    """

    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    fillable: List[str] = Field(default_factory=list, description="Attributes that are mass assignable")
    guarded: List[str] = Field(default_factory=list, description="Attributes that are not mass assignable")
    hidden: List[str] = Field(default_factory=list, description="Attributes hidden from arrays")
    visible: List[str] = Field(default_factory=list, description="Attributes visible in arrays")
    appends: List[str] = Field(default_factory=list, description="Accessors appended to arrays")
    casts: Dict[str, str] = Field(default_factory=dict, description="Attribute cast kinds")

    @field_validator('fillable', 'guarded', 'hidden', 'visible', 'appends', mode='before')
    @classmethod
    def promote_single_name(cls, value: Any) -> Any:
        """Accept a single attribute name or any iterable of names."""
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (tuple, set, frozenset)):
            return list(value)
        return value

    @classmethod
    def from_model_class(cls, model_class: type) -> FieldPolicy:
        """Copy the policy declared on a model class."""
        return cls(
            fillable=list(getattr(model_class, '__fillable__', [])),
            guarded=list(getattr(model_class, '__guarded__', [])),
            hidden=list(getattr(model_class, '__hidden__', [])),
            visible=list(getattr(model_class, '__visible__', [])),
            appends=list(getattr(model_class, '__appends__', [])),
            casts=dict(getattr(model_class, '__casts__', {})),
        )

    def is_totally_guarded(self) -> bool:
        return not self.fillable and self.guarded == ['*']
