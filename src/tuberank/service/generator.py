import logging

from tuberank.categories import DEFAULT_CATEGORY, VideoCategory
from tuberank.config import Settings, get_settings
from tuberank.providers.llm.base import GenerationClient
from tuberank.providers.llm.factory import create_client
from tuberank.service.controller import GenerationController

logger = logging.getLogger(__name__)


class GenerateService:
    """One controller per call over a shared, stateless generation client."""

    def __init__(self, client: GenerationClient | None = None, settings: Settings | None = None) -> None:
        self.settings = settings
        self._client = client

    @property
    def client(self) -> GenerationClient:
        if self._client is None:
            self._client = create_client(self.settings or get_settings())
        return self._client

    async def generate(
        self,
        topic: str,
        audience: str = "",
        category: VideoCategory = DEFAULT_CATEGORY,
    ) -> GenerationController:
        controller = GenerationController(self.client)
        controller.set_topic(topic)
        controller.set_audience(audience)
        controller.set_category(category)
        await controller.submit()
        logger.info("generate.meta phase=%s category=%s", controller.phase.value, category.name)
        return controller
