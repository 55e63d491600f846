import logging
from typing import Protocol

from pydantic import ValidationError as SchemaValidationError

from tuberank.errors import DecodeError, EmptyResponseError
from tuberank.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
PAYLOAD_LOG_LIMIT = 4000


class GenerationClient(Protocol):
    async def generate(self, request: GenerationRequest) -> GenerationResult: ...


def decode_result_text(text: str | None) -> GenerationResult:
    """Parse the model's reply into a GenerationResult.

    Raises EmptyResponseError when there is no text at all and DecodeError
    when the text is not JSON of the expected shape.
    """
    payload = (text or "").strip()
    if not payload:
        raise EmptyResponseError("no response received from model")
    payload = _strip_code_fence(payload)
    try:
        return GenerationResult.model_validate_json(payload)
    except SchemaValidationError as exc:
        logger.warning(
            "llm.decode_failed errors=%d payload=%s",
            exc.error_count(),
            clip(payload, PAYLOAD_LOG_LIMIT),
        )
        raise DecodeError(f"reply does not match expected shape: {exc.error_count()} error(s)") from exc


def _strip_code_fence(payload: str) -> str:
    if not payload.startswith("```"):
        return payload
    lines = payload.splitlines()[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines).strip()


def clip(text: str, limit: int) -> str:
    normalized = " ".join(text.split()).strip()
    if len(normalized) <= limit:
        return normalized
    return f"{normalized[:limit]}...(truncated)"
