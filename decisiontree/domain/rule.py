"""
Decision tree rule model.

A rule maps an ordered set of input drivers to a set of outputs and is
valid between a start and end instant. Equality is by rule identifier;
the duplicate checks compare content and ignore the identifier.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple
from uuid import UUID

from shared.errors import DriverCacheError
from shared.logging import get_logger
from .cache import DriverCache
from .date_range import EPOCH, MAX, DateRange
from .drivers import InputDriver


logger = get_logger("decisiontree.domain.rule")


class DecisionTreeRule:
    """Rule used to build the decision tree.

    Drivers are held in weighted order, index 0 being the most significant.
    Missing start and end instants default to EPOCH and MAX.
    """

    INITIAL_WEIGHTED_VALUE = 1
    EPOCH = EPOCH
    MAX = MAX

    __slots__ = ("_rule_identifier", "_rule_code", "_drivers", "_outputs", "_start", "_end")

    def __init__(self,
                 rule_identifier: UUID,
                 rule_code: UUID,
                 drivers: Iterable[InputDriver],
                 outputs: Mapping[str, str],
                 start: Optional[datetime] = None,
                 end: Optional[datetime] = None):
        self._rule_identifier = rule_identifier
        self._rule_code = rule_code
        self._drivers = list(drivers)
        self._outputs: Dict[str, str] = dict(outputs)
        self._start = start if start is not None else DecisionTreeRule.EPOCH
        self._end = end if end is not None else DecisionTreeRule.MAX

    @property
    def rule_identifier(self) -> UUID:
        """Unique identifier of the rule."""
        return self._rule_identifier

    @property
    def rule_code(self) -> UUID:
        """Identifier shared by all versions of the same rule."""
        return self._rule_code

    @property
    def drivers(self) -> Tuple[InputDriver, ...]:
        """Input drivers in weighted order."""
        return tuple(self._drivers)

    @property
    def outputs(self) -> Mapping[str, str]:
        """Read-only view of the output name/value pairs."""
        return MappingProxyType(self._outputs)

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def range(self) -> DateRange:
        return DateRange(self._start, self._end)

    def is_active_at(self, time: datetime) -> bool:
        """Check if the rule is active at a point in time; both bounds are exclusive."""
        return self._start < time < self._end

    def is_duplicate_rule(self, other: Optional["DecisionTreeRule"]) -> bool:
        """Check if the other rule has identical inputs, outputs and date range."""
        return (other is not None
                and self.is_duplicate_input_data(other)
                and self.is_duplicate_output_data(other)
                and self.is_duplicate_date_range(other))

    def is_duplicate_input_data(self, other: Optional["DecisionTreeRule"]) -> bool:
        """Check if the other rule has the same drivers in the same positions."""
        if other is None or len(self._drivers) != len(other._drivers):
            return False

        for this_driver, other_driver in zip(self._drivers, other._drivers):
            if this_driver != other_driver:
                return False
        return True

    def is_duplicate_output_data(self, other: Optional["DecisionTreeRule"]) -> bool:
        """Check if the other rule has the same outputs."""
        if other is None or len(self._outputs) != len(other._outputs):
            return False

        for name, value in self._outputs.items():
            if other._outputs.get(name) != value:
                return False
        return True

    def is_duplicate_date_range(self, other: Optional["DecisionTreeRule"]) -> bool:
        """Check if the other rule has exactly the same start and end."""
        return other is not None and self._start == other._start and self._end == other._end

    def get_rule_weight(self) -> int:
        """Calculate the weight of the inputs.

        Each driver is one bit, wildcards 0 and anything else 1, with the
        last driver as the least significant bit. Inputs "1", "2", "*", "*"
        give 1100, a weight of 12. The evaluation tree is expected to call
        this once per result node and keep the value.
        """
        weight = 0
        weighted_level = self.INITIAL_WEIGHTED_VALUE

        for driver in reversed(self._drivers):
            if not driver.is_wildcard:
                weight += weighted_level
            weighted_level *= 2
        return weight

    def replace_drivers_from_cache(self, cache: DriverCache) -> None:
        """Replace each driver with the canonical instance held by the cache.

        Drivers missing from the cache are added to it first.
        """
        inserted = 0
        for index, driver in enumerate(self._drivers):
            cached = cache.get(driver.value, driver.type)
            if cached is None:
                cache.put(driver)
                inserted += 1
                cached = cache.get(driver.value, driver.type)
                if cached is None:
                    raise DriverCacheError(
                        "Driver missing from cache after insert",
                        details={
                            "rule_id": str(self._rule_identifier),
                            "value": driver.value,
                            "type": driver.type.value,
                        },
                    )
            self._drivers[index] = cached

        logger.debug(
            "Rule drivers replaced from cache",
            rule_id=str(self._rule_identifier),
            drivers=len(self._drivers),
            inserted=inserted
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DecisionTreeRule):
            return NotImplemented
        return self._rule_identifier == other._rule_identifier

    def __hash__(self) -> int:
        return hash(self._rule_identifier)

    def __repr__(self) -> str:
        return (
            f"DecisionTreeRule(rule_identifier={self._rule_identifier}, "
            f"rule_code={self._rule_code}, "
            f"drivers={[str(driver) for driver in self._drivers]}, "
            f"outputs={self._outputs}, "
            f"start={self._start.isoformat()}, "
            f"end={self._end.isoformat()})"
        )
