"""Hugging Face Inference API client for image classification."""

from dataclasses import dataclass

import httpx
from pydantic import TypeAdapter

from snap_nutrition.domain.classification import Prediction
from snap_nutrition.services.classifier import ImageClassifier
from snap_nutrition.services.images import detect_mime_type

_PREDICTIONS = TypeAdapter(list[Prediction])


@dataclass
class HttpxHuggingFaceClassifier(ImageClassifier):
    """Image classifier backed by a hosted Hugging Face model."""

    model: str
    base_url: str
    api_token: str | None
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, model: str, base_url: str, api_token: str | None = None
    ) -> "HttpxHuggingFaceClassifier":
        """Create a classifier with a managed httpx session."""
        return cls(
            model=model,
            base_url=base_url.rstrip("/"),
            api_token=api_token,
            http_client=httpx.AsyncClient(),
        )

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        """Send image bytes to the model and parse ranked labels."""
        headers = {
            "Content-Type": detect_mime_type(image_bytes) or "application/octet-stream",
            "x-wait-for-model": "true",
        }
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        response = await self.http_client.post(
            f"{self.base_url}/models/{self.model}",
            content=image_bytes,
            headers=headers,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        if isinstance(payload, dict) and "error" in payload:
            raise RuntimeError(f"Hugging Face inference error: {payload['error']}")
        return _PREDICTIONS.validate_python(payload)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
