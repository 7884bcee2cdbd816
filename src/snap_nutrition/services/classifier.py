"""Shared, lazily loaded image classification service."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

from snap_nutrition.domain.classification import Prediction
from snap_nutrition.errors import ClassifierUnavailable, NoPrediction, RecognitionError

UNINITIALIZED = "UNINITIALIZED"
LOADING = "LOADING"
READY = "READY"

_logger = logging.getLogger(__name__)


class ImageClassifier(Protocol):
    """Interface for backends that label food images."""

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        """Return predictions for an image."""

    async def close(self) -> None:
        """Release backend resources."""


ClassifierLoader = Callable[[], Awaitable[ImageClassifier]]


@dataclass
class ClassifierService:
    """Owns the single classifier instance for the process.

    The first call starts the load; calls arriving while it is in flight
    await the same task. A failed load resets the service so a later call
    can retry.
    """

    loader: ClassifierLoader
    timeout_seconds: float | None = 30.0
    _classifier: ImageClassifier | None = field(default=None, init=False, repr=False)
    _load_task: "asyncio.Task[ImageClassifier] | None" = field(
        default=None, init=False, repr=False
    )

    @property
    def state(self) -> str:
        """Return the lifecycle state of the classifier."""
        if self._classifier is not None:
            return READY
        if self._load_task is not None and not self._load_task.cancelled():
            return LOADING
        return UNINITIALIZED

    async def ensure_loaded(self) -> ImageClassifier:
        """Load the classifier once and return it."""
        if self._classifier is not None:
            return self._classifier
        # Check-and-set happens without yielding to the loop.
        task = self._load_task
        if task is None or _is_stale(task):
            task = asyncio.ensure_future(self._load())
            task.add_done_callback(_retrieve_exception)
            self._load_task = task
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if task.cancelled() and not (current and current.cancelling()):
                raise ClassifierUnavailable(
                    "Image classifier load was cancelled"
                ) from None
            raise

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        """Return predictions sorted by descending score."""
        try:
            predictions = await asyncio.wait_for(
                self._classify(image_bytes), timeout=self.timeout_seconds
            )
        except TimeoutError as exc:
            raise ClassifierUnavailable(
                f"Classification timed out after {self.timeout_seconds}s"
            ) from exc
        if not predictions:
            raise NoPrediction()
        return sorted(predictions, key=lambda item: item.score, reverse=True)

    async def close(self) -> None:
        """Close the loaded backend, if any."""
        if self._classifier is not None:
            await self._classifier.close()

    async def _classify(self, image_bytes: bytes) -> list[Prediction]:
        classifier = await self.ensure_loaded()
        try:
            return list(await classifier.classify(image_bytes))
        except RecognitionError:
            raise
        except Exception as exc:
            raise ClassifierUnavailable("Image classification failed") from exc

    async def _load(self) -> ImageClassifier:
        _logger.info("Initializing image classifier")
        try:
            self._classifier = await self.loader()
        except Exception as exc:
            _logger.exception("Image classifier failed to load")
            raise ClassifierUnavailable("Image classifier failed to load") from exc
        finally:
            # Any exit without a classifier, cancellation included, resets.
            if self._classifier is None and self._load_task is asyncio.current_task():
                self._load_task = None
        _logger.info("Image classifier loaded")
        return self._classifier


def _is_stale(task: "asyncio.Task[ImageClassifier]") -> bool:
    return task.cancelled() or task.get_loop() is not asyncio.get_running_loop()


def _retrieve_exception(task: "asyncio.Task[ImageClassifier]") -> None:
    if not task.cancelled():
        task.exception()
