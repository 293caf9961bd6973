from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REMOTE_PROVIDERS = ("numbers_api", "mock")
DEFAULT_REMOTE_PROVIDER = "numbers_api"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    numbers_api_base_url: str = Field(default="http://numbersapi.com", alias="NUMBERS_API_BASE_URL")
    numbers_api_timeout_seconds: float = Field(default=10.0, alias="NUMBERS_API_TIMEOUT_SECONDS")
    remote_provider: str = Field(default=DEFAULT_REMOTE_PROVIDER, alias="TRIVIA_REMOTE_PROVIDER")

    cache_path: str = Field(default="", alias="TRIVIA_CACHE_PATH")

    connectivity_probe_url: str = Field(default="", alias="CONNECTIVITY_PROBE_URL")
    connectivity_timeout_seconds: float = Field(default=3.0, alias="CONNECTIVITY_TIMEOUT_SECONDS")
    assume_online: bool | None = Field(default=None, alias="TRIVIA_ASSUME_ONLINE")

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        self.numbers_api_base_url = self.numbers_api_base_url.strip().rstrip("/") or "http://numbersapi.com"
        self.remote_provider = self.remote_provider.strip().lower()
        if self.remote_provider not in REMOTE_PROVIDERS:
            self.remote_provider = DEFAULT_REMOTE_PROVIDER
        self.cache_path = self.cache_path.strip()
        self.connectivity_probe_url = self.connectivity_probe_url.strip() or self.numbers_api_base_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
