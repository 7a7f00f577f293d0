"""
Decision tree rule domain.

Re-exports the rule value type and the driver collaborators it is
built from.
"""

from decisiontree.domain import (
    EPOCH,
    MAX,
    WILDCARD,
    DateRange,
    DecisionTreeRule,
    DriverCache,
    InputDriver,
    InputValueType,
    to_epoch_millis,
)

__all__ = [
    "EPOCH",
    "MAX",
    "WILDCARD",
    "DateRange",
    "DecisionTreeRule",
    "DriverCache",
    "InputDriver",
    "InputValueType",
    "to_epoch_millis",
]
