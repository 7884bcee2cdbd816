"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from snap_nutrition.api.models import (
    AnalysisResponse,
    DailyTotalsResponse,
    MealEntryResponse,
    NutritionPayload,
    NutritionRecordPayload,
)
from snap_nutrition.app_logging import configure_logging
from snap_nutrition.containers import AppContainer
from snap_nutrition.errors import EntryNotFound, InvalidImage
from snap_nutrition.services.images import validate_image


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analyze")
    async def analyze(request: Request) -> AnalysisResponse:
        """Recognize the food in a raw image body."""
        state_container: AppContainer = request.app.state.container
        image_bytes = await request.body()
        try:
            validate_image(
                image_bytes,
                content_type=request.headers.get("content-type"),
                max_bytes=state_container.settings.max_upload_bytes,
            )
        except InvalidImage as exc:
            logger.info("Rejected upload: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc

        recognition = state_container.recognition_service
        outcome = await recognition.recognize(image_bytes)
        record = outcome.record or recognition.fallback_record()
        return AnalysisResponse(
            food=record.food,
            confidence=record.confidence,
            nutrition=NutritionPayload.from_domain(record.nutrition),
            recognized=outcome.recognized,
            error=outcome.error.code if outcome.error else None,
            label=outcome.label,
        )

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def log_meal(
        payload: NutritionRecordPayload, request: Request
    ) -> MealEntryResponse:
        """Append a recognized food to the meal log."""
        ledger = request.app.state.container.meal_ledger
        entry = ledger.get_entry(ledger.add_entry(payload.to_domain()))
        return MealEntryResponse.from_domain(entry, ledger.meal_time(entry))

    @app.get("/meals")
    async def list_meals(request: Request) -> list[MealEntryResponse]:
        """Return logged meals, newest first."""
        ledger = request.app.state.container.meal_ledger
        return [
            MealEntryResponse.from_domain(entry, ledger.meal_time(entry))
            for entry in ledger.entries()
        ]

    @app.get("/meals/today")
    async def today_totals(request: Request) -> DailyTotalsResponse:
        """Return today's totals and goal progress."""
        ledger = request.app.state.container.meal_ledger
        return DailyTotalsResponse.from_domain(ledger.goal_progress())

    @app.get("/meals/{entry_id}")
    async def get_meal(entry_id: UUID, request: Request) -> MealEntryResponse:
        """Return a logged meal by id."""
        ledger = request.app.state.container.meal_ledger
        try:
            entry = ledger.get_entry(entry_id)
        except EntryNotFound as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
        return MealEntryResponse.from_domain(entry, ledger.meal_time(entry))

    @app.delete("/meals/{entry_id}")
    async def remove_meal(entry_id: UUID, request: Request) -> dict[str, bool]:
        """Remove a logged meal; missing ids are not an error."""
        ledger = request.app.state.container.meal_ledger
        return {"removed": ledger.remove_entry(entry_id)}

    return app
