"""OpenAI Responses API client that labels food photos."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from snap_nutrition.domain.classification import Prediction, PredictionList
from snap_nutrition.services.classifier import ImageClassifier
from snap_nutrition.services.images import to_data_url

PREDICTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "predictions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "label": {"type": "string"},
                    "score": {"type": "number", "minimum": 0.0, "maximum": 1.0},
                },
                "required": ["label", "score"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["predictions"],
    "additionalProperties": False,
}

PROMPT = (
    "Classify the main food in the image. "
    "Return up to five short lowercase labels ranked by likelihood, "
    "each with a score between 0 and 1."
)


@dataclass
class OpenAIImageClassifier(ImageClassifier):
    """Image classifier backed by OpenAI vision models."""

    client: AsyncOpenAI
    model: str
    store: bool = False

    @classmethod
    def create(
        cls, api_key: str, model: str, store: bool = False
    ) -> "OpenAIImageClassifier":
        """Create an OpenAI image classifier."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model, store=store)

    async def classify(self, image_bytes: bytes) -> list[Prediction]:
        """Call the Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=self.model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": PROMPT},
                        {"type": "input_image", "image_url": to_data_url(image_bytes)},
                    ],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "food_predictions",
                    "strict": True,
                    "schema": PREDICTION_SCHEMA,
                }
            },
            store=self.store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return PredictionList.model_validate(json.loads(output_text)).predictions

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
