"""
Domain package for the decision tree.

Modules of interest:
- rule: DecisionTreeRule with duplicate checks, weighting and driver interning.
- drivers: InputDriver values and the wildcard marker.
- cache: DriverCache holding canonical driver instances.
- date_range: DateRange and the EPOCH/MAX default instants.
"""

from .cache import DriverCache
from .date_range import EPOCH, MAX, DateRange, to_epoch_millis
from .drivers import WILDCARD, InputDriver, InputValueType
from .rule import DecisionTreeRule

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
