"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from snap_nutrition.adapters.hf_inference_client import HttpxHuggingFaceClassifier
from snap_nutrition.adapters.openai_classifier_client import OpenAIImageClassifier
from snap_nutrition.config import Settings, parse_classifier_backend
from snap_nutrition.domain.meals import DailyGoals
from snap_nutrition.services.catalog import DEFAULT_CATALOG, NutritionCatalog
from snap_nutrition.services.classifier import (
    ClassifierLoader,
    ClassifierService,
    ImageClassifier,
)
from snap_nutrition.services.ledger import MealLedger
from snap_nutrition.services.recognition import RecognitionService
from snap_nutrition.services.resolver import LabelResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: NutritionCatalog
    resolver: LabelResolver
    classifier_service: ClassifierService
    recognition_service: RecognitionService
    meal_ledger: MealLedger
    close_resources: Callable[[], Awaitable[None]]


def build_classifier_loader(settings: Settings) -> ClassifierLoader:
    """Return a loader for the configured classification backend."""
    backend = parse_classifier_backend(settings.classifier_backend)

    async def load_huggingface() -> ImageClassifier:
        return HttpxHuggingFaceClassifier.create(
            model=settings.hf_model,
            base_url=settings.hf_base_url,
            api_token=settings.hf_api_token,
        )

    async def load_openai() -> ImageClassifier:
        if not settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY is required for the openai backend")
        return OpenAIImageClassifier.create(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            store=settings.openai_store,
        )

    if backend == "openai":
        return load_openai
    return load_huggingface


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = DEFAULT_CATALOG
    resolver = LabelResolver(catalog)
    classifier_service = ClassifierService(
        loader=build_classifier_loader(resolved_settings),
        timeout_seconds=resolved_settings.classify_timeout_seconds,
    )
    recognition_service = RecognitionService(
        classifier=classifier_service,
        resolver=resolver,
        catalog=catalog,
    )
    meal_ledger = MealLedger(
        timezone_name=resolved_settings.timezone,
        goals=DailyGoals(
            calories=resolved_settings.daily_goal_calories,
            protein=resolved_settings.daily_goal_protein_g,
            carbs=resolved_settings.daily_goal_carbs_g,
            fats=resolved_settings.daily_goal_fats_g,
        ),
    )

    async def close_resources() -> None:
        await classifier_service.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        resolver=resolver,
        classifier_service=classifier_service,
        recognition_service=recognition_service,
        meal_ledger=meal_ledger,
        close_resources=close_resources,
    )
