"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from snap_nutrition.domain.nutrition import NutritionRecord

BREAKFAST = "Breakfast"
LUNCH = "Lunch"
SNACK = "Snack"
DINNER = "Dinner"


@dataclass(frozen=True)
class MealEntry:
    """A logged occurrence of a recognized food."""

    id: UUID
    timestamp: datetime
    data: NutritionRecord


@dataclass(frozen=True)
class DailyTotals:
    """Macros summed over the meals of one day."""

    day: date
    calories: int
    protein: float
    carbs: float
    fats: float
    count: int


@dataclass(frozen=True)
class DailyGoals:
    """Daily macro targets."""

    calories: float = 2000
    protein: float = 150
    carbs: float = 200
    fats: float = 65


@dataclass(frozen=True)
class GoalProgress:
    """Daily totals measured against goals, as percentages capped at 100."""

    totals: DailyTotals
    goals: DailyGoals
    calories_pct: float
    protein_pct: float
    carbs_pct: float
    fats_pct: float
