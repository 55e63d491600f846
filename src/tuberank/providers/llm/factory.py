import logging

from tuberank.config import LLM_PROVIDERS, Settings
from tuberank.providers.llm.base import GenerationClient
from tuberank.providers.llm.gemini import GeminiClient
from tuberank.providers.llm.openai_compat import OpenAICompatibleClient

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> GenerationClient:
    provider = settings.llm_provider
    logger.info("llm.client provider=%s", provider)
    if provider == "gemini":
        return GeminiClient(settings)
    if provider == "openai":
        return OpenAICompatibleClient(settings)
    raise ValueError(f"unknown LLM_PROVIDER {provider!r}; expected one of {', '.join(LLM_PROVIDERS)}")
