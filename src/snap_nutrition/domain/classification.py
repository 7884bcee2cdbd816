"""Models for image classification results."""

from pydantic import BaseModel, Field


class Prediction(BaseModel):
    """Single label predicted for an image."""

    label: str
    score: float = Field(ge=0.0, le=1.0)


class PredictionList(BaseModel):
    """Structured output returned by vision backends."""

    predictions: list[Prediction]
