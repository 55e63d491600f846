import logging
from enum import Enum
from typing import Any

from tuberank.categories import DEFAULT_CATEGORY, VideoCategory
from tuberank.errors import DecodeError, ServiceError, ValidationError
from tuberank.providers.llm.base import GenerationClient, clip
from tuberank.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

EMPTY_TOPIC_MESSAGE = "الرجاء إدخال فكرة الفيديو"
GENERATION_FAILED_MESSAGE = "حدث خطأ أثناء توليد البيانات. يرجى المحاولة مرة أخرى."


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class GenerationController:
    """Form state and the single in-flight generation.

    Field edits are accepted in every phase. A submission while loading is
    ignored, so at most one request is ever outstanding.
    """

    def __init__(self, client: GenerationClient) -> None:
        self.client = client
        self.topic = ""
        self.audience = ""
        self.category: VideoCategory = DEFAULT_CATEGORY
        self.loading = False
        self.result: GenerationResult | None = None
        self.error: str | None = None
        self.failure: Exception | None = None
        self.phase = Phase.IDLE

    def set_topic(self, topic: str) -> None:
        self.topic = topic

    def set_audience(self, audience: str) -> None:
        self.audience = audience

    def set_category(self, category: VideoCategory) -> None:
        self.category = category

    @property
    def can_submit(self) -> bool:
        return not self.loading

    def build_request(self) -> GenerationRequest:
        if not self.topic.strip():
            raise ValidationError(EMPTY_TOPIC_MESSAGE)
        return GenerationRequest(topic=self.topic, audience=self.audience, category=self.category)

    async def submit(self) -> bool:
        """Run one generation; return True when a request was issued."""
        if self.loading:
            logger.info("generate.suppressed reason=in_flight")
            return False
        try:
            request = self.build_request()
        except ValidationError as exc:
            logger.info("generate.rejected reason=empty_topic")
            self.error = str(exc)
            self.failure = exc
            return False

        self.error = None
        self.failure = None
        self.result = None
        self.loading = True
        self.phase = Phase.LOADING
        logger.info("generate.start topic=%s category=%s", clip(request.topic, 80), request.category.name)
        try:
            result = await self.client.generate(request)
        except DecodeError as exc:
            logger.error("generate.decode_failed topic=%s detail=%s", clip(request.topic, 80), exc)
            self._fail(exc)
        except ServiceError as exc:
            logger.error(
                "generate.service_failed topic=%s type=%s detail=%s",
                clip(request.topic, 80),
                exc.__class__.__name__,
                exc,
            )
            self._fail(exc)
        except Exception as exc:
            logger.exception("generate.failed topic=%s", clip(request.topic, 80))
            self._fail(exc)
        else:
            self.result = result
            self.phase = Phase.SUCCESS
            logger.info("generate.done titles=%d keywords=%d", len(result.titles), len(result.keywords))
        finally:
            self.loading = False
        return True

    def _fail(self, exc: Exception) -> None:
        self.result = None
        self.failure = exc
        self.error = GENERATION_FAILED_MESSAGE
        self.phase = Phase.FAILED

    def snapshot(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value,
            "topic": self.topic,
            "audience": self.audience,
            "category": self.category.name,
            "loading": self.loading,
            "error": self.error,
            "result": self.result.to_wire() if self.result is not None else None,
        }
