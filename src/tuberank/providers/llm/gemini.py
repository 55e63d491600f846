import logging
from typing import Any

import httpx

from tuberank.config import Settings
from tuberank.errors import ServiceError
from tuberank.prompts import build_prompt
from tuberank.providers.llm.base import PAYLOAD_LOG_LIMIT, TEMPERATURE, clip, decode_result_text
from tuberank.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class GeminiClient:
    """Gemini generateContent client with a declared response schema."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self.model = settings.gemini_model
        self.endpoint = f"{settings.gemini_base_url.rstrip('/')}/models/{self.model}:generateContent"
        self.timeout = settings.llm_timeout_seconds
        self.transport = transport
        if not settings.gemini_api_key:
            logger.error("llm.credential_missing provider=gemini env=GEMINI_API_KEY")

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        prompt = build_prompt(request, self.settings.output_language)
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt.instruction}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": to_gemini_schema(prompt.response_schema),
                "temperature": TEMPERATURE,
            },
        }
        logger.info(
            "llm.request provider=gemini model=%s topic=%s category=%s",
            self.model,
            clip(request.topic, 80),
            request.category.name,
        )
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                http_response = await client.post(
                    self.endpoint,
                    json=body,
                    headers={"x-goog-api-key": self.settings.gemini_api_key},
                )
                http_response.raise_for_status()
                payload = http_response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "llm.error provider=gemini status_code=%d body=%s",
                exc.response.status_code,
                clip(exc.response.text, PAYLOAD_LOG_LIMIT),
            )
            raise ServiceError(f"gemini returned HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("llm.error provider=gemini type=%s detail=%s", exc.__class__.__name__, exc)
            raise ServiceError(f"gemini request failed: {exc.__class__.__name__}") from exc

        if not isinstance(payload, dict):
            logger.error(
                "llm.error provider=gemini type=unexpected_body body=%s",
                clip(str(payload), PAYLOAD_LOG_LIMIT),
            )
            raise ServiceError(f"gemini returned a {type(payload).__name__} body, expected an object")

        text = self._response_text(payload)
        logger.info("llm.response provider=gemini chars=%d", len(text))
        return decode_result_text(text)

    @staticmethod
    def _response_text(payload: dict[str, Any]) -> str:
        candidates = payload.get("candidates") or []
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return ""
        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return ""
        return "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict))


def to_gemini_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Convert a JSON-Schema dict into Gemini's OpenAPI-subset dialect."""
    converted: dict[str, Any] = {}
    for key, value in schema.items():
        if key == "additionalProperties":
            continue
        if key == "type":
            converted[key] = str(value).upper()
        elif key == "properties":
            converted[key] = {name: to_gemini_schema(child) for name, child in value.items()}
        elif key == "items":
            converted[key] = to_gemini_schema(value)
        else:
            converted[key] = value
    return converted
