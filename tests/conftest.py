"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from snap_nutrition.config import Settings
from snap_nutrition.containers import AppContainer
from snap_nutrition.domain.classification import Prediction
from snap_nutrition.services.catalog import DEFAULT_CATALOG
from snap_nutrition.services.classifier import ClassifierService, ImageClassifier
from snap_nutrition.services.ledger import MealLedger
from snap_nutrition.services.recognition import RecognitionService
from snap_nutrition.services.resolver import LabelResolver

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake-png-body"
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"fake-jpeg-body"


@dataclass
class FakeImageClassifier(ImageClassifier):
    """Fake classifier returning fixed predictions or raising."""

    predictions: list[Prediction] = field(
        default_factory=lambda: [
            Prediction(label="Granny Smith apple", score=0.87),
            Prediction(label="orange", score=0.05),
        ]
    )
    error: Exception | None = None
    calls: list[bytes] = field(default_factory=list)
    closed: bool = False

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        self.calls.append(image_bytes)
        if self.error is not None:
            raise self.error
        return self.predictions

    async def close(self) -> None:
        self.closed = True


@dataclass
class CountingLoader:
    """Loader that returns a classifier and counts invocations."""

    classifier: ImageClassifier
    error: Exception | None = None
    calls: int = 0

    async def __call__(self) -> ImageClassifier:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.classifier


@dataclass
class FakeClock:
    """Settable clock for ledger tests."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 5, 17, 12, 30, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        classifier_backend="huggingface",
        hf_api_token="hf-token",
        openai_api_key="openai-key",
    )


@pytest.fixture
def fake_classifier() -> FakeImageClassifier:
    return FakeImageClassifier()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger(clock: FakeClock) -> MealLedger:
    return MealLedger(clock=clock)


@pytest.fixture
def container(
    settings: Settings,
    fake_classifier: FakeImageClassifier,
    ledger: MealLedger,
) -> AppContainer:
    resolver = LabelResolver(DEFAULT_CATALOG)
    classifier_service = ClassifierService(loader=CountingLoader(fake_classifier))
    recognition_service = RecognitionService(
        classifier=classifier_service,
        resolver=resolver,
        catalog=DEFAULT_CATALOG,
    )

    async def close_resources() -> None:
        await classifier_service.close()

    return AppContainer(
        settings=settings,
        catalog=DEFAULT_CATALOG,
        resolver=resolver,
        classifier_service=classifier_service,
        recognition_service=recognition_service,
        meal_ledger=ledger,
        close_resources=close_resources,
    )
