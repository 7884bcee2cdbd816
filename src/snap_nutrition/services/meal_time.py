"""Bucket timestamps into meals of the day."""

from datetime import datetime

from snap_nutrition.domain.meals import BREAKFAST, DINNER, LUNCH, SNACK

LUNCH_START_HOUR = 10
SNACK_START_HOUR = 14
DINNER_START_HOUR = 18


def label_for(timestamp: datetime) -> str:
    """Return the meal label for the hour of a timestamp."""
    hour = timestamp.hour
    if hour < LUNCH_START_HOUR:
        return BREAKFAST
    if hour < SNACK_START_HOUR:
        return LUNCH
    if hour < DINNER_START_HOUR:
        return SNACK
    return DINNER
