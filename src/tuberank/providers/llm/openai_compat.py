import logging
from typing import Any

from tuberank.config import Settings
from tuberank.errors import ServiceError
from tuberank.prompts import build_prompt
from tuberank.providers.llm.base import TEMPERATURE, clip, decode_result_text
from tuberank.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 1000
PLACEHOLDER_API_KEY = "missing-api-key"


class OpenAICompatibleClient:
    """OpenAI-compatible chat endpoint (OpenAI, DeepSeek, ...) via langchain-openai."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.model = settings.openai_model
        self._llm: Any | None = None
        if not settings.openai_api_key:
            logger.error("llm.credential_missing provider=openai env=OPENAI_API_KEY")

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        prompt = build_prompt(request, self.settings.output_language)
        logger.info(
            "llm.request provider=openai model=%s topic=%s category=%s",
            self.model,
            clip(request.topic, 80),
            request.category.name,
        )
        try:
            llm = self._get_llm().bind(
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "publishing_plan",
                        "strict": True,
                        "schema": prompt.response_schema,
                    },
                }
            )
            response = await llm.ainvoke(prompt.instruction)
        except Exception as exc:
            logger.error(
                "llm.error provider=openai model=%s type=%s detail=%s",
                self.model,
                exc.__class__.__name__,
                self._extract_error_detail(exc),
            )
            raise ServiceError(f"openai request failed: {exc.__class__.__name__}") from exc

        text = self._message_text(getattr(response, "content", response))
        logger.info("llm.response provider=openai chars=%d", len(text))
        return decode_result_text(text)

    def _get_llm(self):
        if self._llm is None:
            from langchain_openai import ChatOpenAI

            self._llm = ChatOpenAI(
                model=self.model,
                api_key=self.settings.openai_api_key or PLACEHOLDER_API_KEY,
                base_url=self.settings.openai_base_url,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=0,
                temperature=TEMPERATURE,
            )
        return self._llm

    @staticmethod
    def _message_text(content: Any) -> str:
        if content is None:
            return ""
        if isinstance(content, str):
            return content.strip()
        if isinstance(content, list):
            parts: list[str] = []
            for item in content:
                if isinstance(item, dict):
                    parts.append(str(item.get("text", "")))
                else:
                    parts.append(str(item))
            return "".join(parts).strip()
        return str(content).strip()

    @staticmethod
    def _extract_error_detail(exc: Exception) -> str:
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        details = [f"status_code={status_code}" if status_code is not None else "", f"message={message}"]
        return clip(" ".join(part for part in details if part), ERROR_LOG_LIMIT)
