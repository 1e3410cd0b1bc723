"""Parameter model for classified step method parameters.

Each parameter of a step method is reduced to a name and a kind. Kinds
other than ``enum`` map onto the builder's input widgets directly; an
``enum`` parameter names a user-defined type whose values are resolved
separately.
"""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ParameterKind(str, Enum):
    """Classification of a step parameter type."""

    NUMBER = "number"
    TEXT = "text"
    DATE = "date"
    ENUM = "enum"


class ParameterDescriptor(BaseModel):
    """Classified parameter of a step method.

    Attributes:
        name: Parameter name, suffixed with ``List`` for list-valued parameters.
        kind: Type classification.
        enum_type: Declared type name, set only when ``kind`` is ``enum``.

    Example:
        >>> ParameterDescriptor.enum_ref("petsList", "Animal")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name")
    kind: ParameterKind = Field(description="Type classification")
    enum_type: str | None = Field(
        default=None, description="User-defined type name for enum parameters"
    )

    @model_validator(mode="after")
    def _check_enum_type(self) -> Self:
        if self.kind is ParameterKind.ENUM and not self.enum_type:
            raise ValueError("enum parameters require an enum_type")
        if self.kind is not ParameterKind.ENUM and self.enum_type is not None:
            raise ValueError(f"{self.kind.value} parameters cannot carry an enum_type")
        return self

    @classmethod
    def number(cls, name: str) -> "ParameterDescriptor":
        return cls(name=name, kind=ParameterKind.NUMBER)

    @classmethod
    def text(cls, name: str) -> "ParameterDescriptor":
        return cls(name=name, kind=ParameterKind.TEXT)

    @classmethod
    def date(cls, name: str) -> "ParameterDescriptor":
        return cls(name=name, kind=ParameterKind.DATE)

    @classmethod
    def enum_ref(cls, name: str, type_name: str) -> "ParameterDescriptor":
        return cls(name=name, kind=ParameterKind.ENUM, enum_type=type_name)
