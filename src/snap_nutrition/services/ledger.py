"""In-memory meal ledger with daily aggregation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from snap_nutrition.domain.meals import (
    DailyGoals,
    DailyTotals,
    GoalProgress,
    MealEntry,
)
from snap_nutrition.domain.nutrition import NutritionRecord
from snap_nutrition.errors import EntryNotFound
from snap_nutrition.services.meal_time import label_for

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class MealLedger:
    """Session-owned log of meals, newest first."""

    timezone_name: str = "UTC"
    goals: DailyGoals = field(default_factory=DailyGoals)
    clock: Callable[[], datetime] = _utc_now
    _entries: list[MealEntry] = field(default_factory=list, init=False, repr=False)

    @property
    def tz(self) -> ZoneInfo:
        """Return the timezone used for calendar days and meal times."""
        return ZoneInfo(self.timezone_name)

    def add_entry(self, record: NutritionRecord) -> UUID:
        """Log a record as a new meal and return its id."""
        entry_id = uuid4()
        while any(entry.id == entry_id for entry in self._entries):
            entry_id = uuid4()
        entry = MealEntry(id=entry_id, timestamp=self.clock(), data=record)
        self._entries.insert(0, entry)
        _logger.info("Logged meal id=%s food=%s", entry.id, record.food)
        return entry.id

    def remove_entry(self, entry_id: UUID) -> bool:
        """Remove a meal by id; return whether one was removed."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                _logger.info("Removed meal id=%s", entry_id)
                return True
        return False

    def get_entry(self, entry_id: UUID) -> MealEntry:
        """Return a meal by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise EntryNotFound(entry_id)

    def entries(self) -> list[MealEntry]:
        """Return logged meals, newest first."""
        return list(self._entries)

    def meal_time(self, entry: MealEntry) -> str:
        """Return the meal-of-day label for an entry in the ledger timezone."""
        return label_for(entry.timestamp.astimezone(self.tz))

    def today(self) -> date:
        """Return the current calendar day in the ledger timezone."""
        return self.clock().astimezone(self.tz).date()

    def daily_totals(self, reference_date: date | None = None) -> DailyTotals:
        """Sum macros for meals logged on a calendar day."""
        day = reference_date or self.today()
        tz = self.tz
        calories = 0
        protein = carbs = fats = 0.0
        count = 0
        for entry in self._entries:
            if entry.timestamp.astimezone(tz).date() != day:
                continue
            nutrition = entry.data.nutrition
            calories += nutrition.calories
            protein += nutrition.protein
            carbs += nutrition.carbs
            fats += nutrition.fats
            count += 1
        return DailyTotals(
            day=day,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fats=fats,
            count=count,
        )

    def goal_progress(self, reference_date: date | None = None) -> GoalProgress:
        """Return daily totals as capped percentages of the goals."""
        totals = self.daily_totals(reference_date)
        return GoalProgress(
            totals=totals,
            goals=self.goals,
            calories_pct=_percent_of(totals.calories, self.goals.calories),
            protein_pct=_percent_of(totals.protein, self.goals.protein),
            carbs_pct=_percent_of(totals.carbs, self.goals.carbs),
            fats_pct=_percent_of(totals.fats, self.goals.fats),
        )


def _percent_of(value: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return min(value / goal * 100, 100.0)
