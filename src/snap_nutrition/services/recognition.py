"""Recognition pipeline from food photo to nutrition record."""

import logging
from dataclasses import dataclass

from snap_nutrition.domain.nutrition import NutritionRecord
from snap_nutrition.errors import RecognitionError
from snap_nutrition.services.catalog import NutritionCatalog
from snap_nutrition.services.classifier import ClassifierService
from snap_nutrition.services.resolver import LabelResolver

UNKNOWN_FOOD = "Unknown Food"
# Shown to users when recognition fails; not a measured score.
FALLBACK_CONFIDENCE = 0.9

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecognitionOutcome:
    """Either a recognized record or the error that prevented it."""

    record: NutritionRecord | None
    error: RecognitionError | None = None
    label: str | None = None

    @property
    def recognized(self) -> bool:
        """Return True when the classifier produced the record."""
        return self.error is None


@dataclass
class RecognitionService:
    """Compose classifier, resolver and catalog into one analysis step."""

    classifier: ClassifierService
    resolver: LabelResolver
    catalog: NutritionCatalog

    async def recognize(self, image_bytes: bytes) -> RecognitionOutcome:
        """Classify an image and keep failures distinguishable."""
        try:
            predictions = await self.classifier.classify(image_bytes)
        except RecognitionError as exc:
            _logger.warning("Food recognition failed (%s): %s", exc.code, exc)
            return RecognitionOutcome(record=None, error=exc)

        top = predictions[0]
        key = self.resolver.resolve(top.label)
        record = NutritionRecord(
            food=_capitalize(key),
            confidence=top.score,
            nutrition=self.catalog.lookup(key),
        )
        _logger.info(
            "Recognized label=%r key=%s score=%.3f", top.label, key, top.score
        )
        return RecognitionOutcome(record=record, label=top.label)

    async def analyze(self, image_bytes: bytes) -> NutritionRecord:
        """Return a nutrition record, falling back when recognition fails."""
        outcome = await self.recognize(image_bytes)
        if outcome.record is None:
            return self.fallback_record()
        return outcome.record

    def fallback_record(self) -> NutritionRecord:
        """Record returned when the classifier cannot answer."""
        return NutritionRecord(
            food=UNKNOWN_FOOD,
            confidence=FALLBACK_CONFIDENCE,
            nutrition=self.catalog.default,
        )


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]
