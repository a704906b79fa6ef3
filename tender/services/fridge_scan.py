"""Fridge scanning service using Claude Vision."""

import json
import logging

import anthropic

from tender.config import get_settings
from tender.models.enums import ItemCategory
from tender.schemas.inventory import ScannedIngredient

logger = logging.getLogger(__name__)

CATEGORY_NAMES = {category.value for category in ItemCategory}

SCAN_PROMPT = f"""Identify all visible food ingredients in this photo of a fridge, pantry, or food items.

For each ingredient, provide:
1. "name": the ingredient name (e.g. "Eggs", "Cheddar Cheese", "Carrots")
2. "quantity": a number, the estimated count (use 1 if unsure)
3. "category": one of {", ".join(sorted(CATEGORY_NAMES))}

Return ONLY a JSON array of objects with "name", "quantity" and "category" fields.

Example output:
[
  {{"name": "Eggs", "quantity": 6, "category": "Dairy"}},
  {{"name": "Carrots", "quantity": 4, "category": "Produce"}}
]

Return ONLY the JSON array, no other text."""


class ScanNotConfiguredError(RuntimeError):
    """No vision API key is configured."""


class ScanFailedError(RuntimeError):
    """The vision service failed or returned something unusable."""


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")[1:]
        if lines and lines[-1].strip().startswith("```"):
            lines = lines[:-1]
        text = "\n".join(lines)
    return text.strip()


def parse_scan_reply(text: str) -> list[ScannedIngredient]:
    """Parse the model's JSON reply into ingredients, normalizing categories."""
    try:
        data = json.loads(strip_code_fence(text))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse vision response as JSON: {e}")
        logger.error(f"Response was: {text}")
        raise ScanFailedError("Failed to parse ingredient list from image analysis") from e

    if not isinstance(data, list):
        raise ScanFailedError("Image analysis did not return a list of ingredients")

    ingredients = []
    for item in data:
        if not isinstance(item, dict) or not item.get("name"):
            continue
        try:
            quantity = float(item.get("quantity") or 1)
        except (TypeError, ValueError):
            quantity = 1.0
        category = item.get("category")
        ingredients.append(
            ScannedIngredient(
                name=str(item["name"]).strip(),
                quantity=quantity if quantity > 0 else 1.0,
                category=category if category in CATEGORY_NAMES else ItemCategory.OTHER.value,
            )
        )
    return ingredients


class FridgeScanService:
    """Service for recognizing ingredients in a photo."""

    def __init__(self, client: anthropic.Anthropic | None = None) -> None:
        """Initialize the scan service."""
        settings = get_settings()
        self.api_key = settings.anthropic_api_key
        self.model = settings.vision_model
        self._client = client

    @property
    def is_configured(self) -> bool:
        """Check if a vision client is available."""
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> anthropic.Anthropic:
        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self.api_key)
        return self._client

    def scan(self, image_base64: str, media_type: str = "image/jpeg") -> list[ScannedIngredient]:
        """Recognize ingredients in a base64-encoded image.

        Args:
            image_base64: Image bytes, base64-encoded
            media_type: MIME type (e.g., "image/jpeg", "image/png")

        Returns:
            Ingredients guessed from the image
        """
        if not self.is_configured:
            raise ScanNotConfiguredError("Anthropic API not configured")

        try:
            message = self._get_client().messages.create(
                model=self.model,
                max_tokens=1024,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image",
                                "source": {
                                    "type": "base64",
                                    "media_type": media_type,
                                    "data": image_base64,
                                },
                            },
                            {"type": "text", "text": SCAN_PROMPT},
                        ],
                    }
                ],
            )
        except anthropic.APIError as e:
            logger.error(f"Vision API error: {e}")
            raise ScanFailedError("Failed to analyze image") from e

        return parse_scan_reply(message.content[0].text)
