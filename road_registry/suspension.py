"""
suspension.py - Demerit point suspension rule.

Sums the points recorded inside a rolling window ending at an offense date
and compares the total with an age-dependent threshold.

Module: road_registry.suspension
"""
from __future__ import annotations

__all__ = ['SuspensionDecision', 'SuspensionRule']

import logging
from dataclasses import dataclass
from datetime import date as _date
from typing import TYPE_CHECKING, Iterable

from .date_utils import calculate_age, format_date, in_window, window_start
from .offense import OffenseEntry

if TYPE_CHECKING:
    from .config import RegistryConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuspensionDecision:
    """
    Result of a suspension computation.

    Attributes:
        suspended (bool): New suspension status.
        total_points (int): Points counted inside the window.
        age_at_offense (int): Age on the reference offense date.
        window_start (date): First date counted (inclusive).
        threshold (int): Points above which the person is suspended.
    """
    suspended: bool
    total_points: int
    age_at_offense: int
    window_start: _date
    threshold: int


@dataclass
class SuspensionRule:
    """
    Derive suspension status from demerit points inside a rolling window.

    Points from every entry dated on or after (offense date - window_years)
    are summed. Drivers younger than young_driver_age on the offense date are
    suspended when the total exceeds young_driver_threshold; everyone else when
    it exceeds full_licence_threshold.

    The result replaces any previous status: a person whose windowed total
    drops below the threshold is no longer suspended.
    """
    rule_id: str = "suspension"
    window_years: int = 2
    young_driver_age: int = 21
    young_driver_threshold: int = 6
    full_licence_threshold: int = 12

    @classmethod
    def from_config(cls, config: RegistryConfig) -> SuspensionRule:
        return cls(
            window_years=config.window_years,
            young_driver_age=config.young_driver_age,
            young_driver_threshold=config.young_driver_threshold,
            full_licence_threshold=config.full_licence_threshold,
        )

    def threshold_for_age(self, age: int) -> int:
        if age < self.young_driver_age:
            return self.young_driver_threshold
        return self.full_licence_threshold

    def windowed_points(self, entries: Iterable[OffenseEntry], offense_date: _date) -> int:
        """Sum the points of all entries on or after the window start for offense_date."""
        start = window_start(offense_date, self.window_years)
        return sum(e.points for e in entries if in_window(e.offense_date, start))

    def evaluate(self, entries: Iterable[OffenseEntry], offense_date: _date, birth_date: _date) -> SuspensionDecision:
        """
        Compute suspension status for a person's offense history.

        Args:
            entries: Full offense history, including the offense being processed.
            offense_date: Date of the offense being processed.
            birth_date: The person's date of birth.

        Returns:
            SuspensionDecision: The new status and the figures behind it.
        """
        # Age at the offense, not today: back-dated offenses use historical age
        age = calculate_age(birth_date, offense_date)
        start = window_start(offense_date, self.window_years)
        total = self.windowed_points(entries, offense_date)
        threshold = self.threshold_for_age(age)
        decision = SuspensionDecision(
            suspended=total > threshold,
            total_points=total,
            age_at_offense=age,
            window_start=start,
            threshold=threshold,
        )
        logger.debug(
            f"{self.rule_id}: age {age} on {format_date(offense_date)}, "
            f"{total} points since {format_date(start)} (threshold {threshold}) -> suspended={decision.suspended}"
        )
        return decision
