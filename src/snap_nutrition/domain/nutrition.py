"""Nutrition domain models."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MacroQuantities:
    """Macronutrient quantities for one serving of a food."""

    calories: int
    protein: float
    carbs: float
    fats: float

    def __post_init__(self) -> None:
        if isinstance(self.calories, bool) or not isinstance(self.calories, int):
            raise ValueError("calories must be an integer")
        for name in ("calories", "protein", "carbs", "fats"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative number")

    def as_dict(self) -> dict[str, float]:
        """Return the quantities keyed by macro name."""
        return {
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }


@dataclass(frozen=True)
class NutritionRecord:
    """Result of recognizing one food photo."""

    food: str
    confidence: float
    nutrition: MacroQuantities

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("confidence must be within [0, 1]")
