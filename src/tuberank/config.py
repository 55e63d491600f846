from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LLM_PROVIDERS = ("gemini", "openai")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    llm_provider: str = Field(default="gemini", alias="LLM_PROVIDER")
    llm_timeout_seconds: float = Field(default=60.0, alias="LLM_TIMEOUT_SECONDS")

    gemini_api_key: str = Field(default="", alias="GEMINI_API_KEY")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_BASE_URL",
    )
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")

    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    openai_base_url: str = Field(default="https://api.openai.com/v1", alias="OPENAI_BASE_URL")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")

    output_language: str = Field(default="Arabic", alias="OUTPUT_LANGUAGE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def model_post_init(self, __context) -> None:  # type: ignore[override]
        self.llm_provider = self.llm_provider.strip().lower() or "gemini"
        self.output_language = self.output_language.strip() or "Arabic"
        self.log_level = self.log_level.strip().upper() or "INFO"

    def api_key_for(self, provider: str) -> str:
        if provider == "gemini":
            return self.gemini_api_key
        if provider == "openai":
            return self.openai_api_key
        return ""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
