"""Supported option value types.

Each scope keeps one store per member of ``ValueType``. Call sites may name a
type either by the enum member or by the plain Python type it wraps.
"""

from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """Value types an option can hold."""

    BOOL = "bool"
    INT = "int"
    STRING = "string"
    FLOAT = "float"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @property
    def zero(self):
        """Value a slot starts with when created by reference."""
        return _ZERO_VALUES[self]

    @classmethod
    def of(cls, value_type) -> "ValueType":
        """Normalize a ``ValueType`` or a Python type into a ``ValueType``."""
        if isinstance(value_type, ValueType):
            return value_type
        for member, python_type in _PYTHON_TYPES.items():
            if value_type is python_type:
                return member
        raise TypeError(f"Unsupported option type: {value_type!r}")

    @classmethod
    def infer(cls, value) -> "ValueType":
        """Pick the store for a value from its runtime type."""
        # bool is a subclass of int, so it has to be tested first
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        raise TypeError(f"Cannot store value of type {type(value).__name__}")

    def coerce(self, value):
        """Check ``value`` against this type, widening int to float."""
        if self is ValueType.FLOAT and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if ValueType.infer(value) is not self:
            raise TypeError(
                f"Expected {self.value} value, got {type(value).__name__}: {value!r}"
            )
        return value


_PYTHON_TYPES: dict[ValueType, type] = {
    ValueType.BOOL: bool,
    ValueType.INT: int,
    ValueType.STRING: str,
    ValueType.FLOAT: float,
}

_ZERO_VALUES: dict[ValueType, object] = {
    ValueType.BOOL: False,
    ValueType.INT: 0,
    ValueType.STRING: "",
    ValueType.FLOAT: 0.0,
}
