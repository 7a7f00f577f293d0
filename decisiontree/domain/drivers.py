"""
Input driver value types.

An input driver is one positional condition of a rule. It is either a
concrete value of some InputValueType or the wildcard, which matches any
input at that position.
"""

from dataclasses import dataclass
from enum import Enum


WILDCARD = "*"


class InputValueType(str, Enum):
    """Input driver value types."""
    STRING = "string"
    REGEX = "regex"
    VALUE_GROUP = "value_group"
    DATE_RANGE = "date_range"
    INTEGER_RANGE = "integer_range"


@dataclass(frozen=True)
class InputDriver:
    """Input driver identified by its value and type."""

    value: str
    type: InputValueType = InputValueType.STRING

    @property
    def is_wildcard(self) -> bool:
        """Return True if the driver matches any input."""
        return self.value == WILDCARD

    @classmethod
    def wildcard(cls, value_type: InputValueType = InputValueType.STRING) -> "InputDriver":
        """Create a wildcard driver."""
        return cls(WILDCARD, value_type)

    @classmethod
    def string(cls, value: str) -> "InputDriver":
        """Create a string driver."""
        return cls(value, InputValueType.STRING)

    def __str__(self) -> str:
        return self.value
