"""Pydantic models for the HTTP API payloads."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from snap_nutrition.domain.meals import GoalProgress, MealEntry
from snap_nutrition.domain.nutrition import MacroQuantities, NutritionRecord


class NutritionPayload(BaseModel):
    """Macro quantities payload."""

    calories: int = Field(ge=0)
    protein: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)
    fats: float = Field(ge=0.0)

    @classmethod
    def from_domain(cls, macros: MacroQuantities) -> "NutritionPayload":
        return cls(**macros.as_dict())


class NutritionRecordPayload(BaseModel):
    """Recognized food with confidence and macros."""

    food: str
    confidence: float = Field(ge=0.0, le=1.0)
    nutrition: NutritionPayload

    @classmethod
    def from_domain(cls, record: NutritionRecord) -> "NutritionRecordPayload":
        return cls(
            food=record.food,
            confidence=record.confidence,
            nutrition=NutritionPayload.from_domain(record.nutrition),
        )

    def to_domain(self) -> NutritionRecord:
        """Convert the payload into a nutrition record."""
        return NutritionRecord(
            food=self.food,
            confidence=self.confidence,
            nutrition=MacroQuantities(**self.nutrition.model_dump()),
        )


class AnalysisResponse(NutritionRecordPayload):
    """Analysis result, flagged when it is the fallback record."""

    recognized: bool
    error: str | None = None
    label: str | None = None


class MealEntryResponse(BaseModel):
    """Logged meal payload."""

    id: UUID
    timestamp: datetime
    meal_time: str
    data: NutritionRecordPayload

    @classmethod
    def from_domain(cls, entry: MealEntry, meal_time: str) -> "MealEntryResponse":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            meal_time=meal_time,
            data=NutritionRecordPayload.from_domain(entry.data),
        )


class DailyTotalsResponse(BaseModel):
    """Totals for one day with percent-of-goal progress."""

    day: date
    calories: int
    protein: float
    carbs: float
    fats: float
    count: int
    goals: NutritionPayload
    progress: dict[str, float]

    @classmethod
    def from_domain(cls, progress: GoalProgress) -> "DailyTotalsResponse":
        totals = progress.totals
        return cls(
            day=totals.day,
            calories=totals.calories,
            protein=totals.protein,
            carbs=totals.carbs,
            fats=totals.fats,
            count=totals.count,
            goals=NutritionPayload(
                calories=round(progress.goals.calories),
                protein=progress.goals.protein,
                carbs=progress.goals.carbs,
                fats=progress.goals.fats,
            ),
            progress={
                "calories": progress.calories_pct,
                "protein": progress.protein_pct,
                "carbs": progress.carbs_pct,
                "fats": progress.fats_pct,
            },
        )
