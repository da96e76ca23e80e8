from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DayType
from ..model import DailyComputation, DailyPunchRecord, OvertimeSplit


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily hours)."""

    @abstractmethod
    def expected_minutes(self, *, is_saturday: bool, is_sunday: bool, day_type: DayType) -> int:
        raise NotImplementedError

    @abstractmethod
    def worked_minutes(self, record: DailyPunchRecord) -> int:
        raise NotImplementedError

    @abstractmethod
    def overtime(self, worked: int, *, is_saturday: bool) -> OvertimeSplit:
        raise NotImplementedError

    @abstractmethod
    def has_short_lunch(self, record: DailyPunchRecord) -> bool:
        raise NotImplementedError

    def delay_minutes(self, worked: int, expected: int) -> int:
        return max(0, expected - worked)

    def compute(self, record: DailyPunchRecord, *, is_saturday: bool, is_sunday: bool) -> DailyComputation:
        worked = self.worked_minutes(record)
        expected = self.expected_minutes(is_saturday=is_saturday, is_sunday=is_sunday, day_type=record.day_type)
        split = self.overtime(worked, is_saturday=is_saturday)
        return DailyComputation(
            worked_minutes=worked,
            expected_minutes=expected,
            delay_minutes=self.delay_minutes(worked, expected),
            overtime_tier1_minutes=split.tier1,
            overtime_tier2_minutes=split.tier2,
            has_short_lunch=self.has_short_lunch(record),
        )
