from pathlib import Path
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[3] / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    project_name: str = "Scholar Search"
    log_level: str = "INFO"

    redis_host: str = "localhost"
    redis_port: int = 6379
    history_key: str = "searchHistory"
    history_capacity: int = Field(default=10, ge=1)

    # API contact email used in User-Agent headers for polite API access
    api_contact_email: str = Field(
        default="researcher@example.com",
        description="Email for API contact/User-Agent (update with your real email)"
    )

    pubmed_search_url: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esearch.fcgi"
    arxiv_query_url: str = "https://export.arxiv.org/api/query"

    http_timeout_seconds: float = 15.0
    # Upper bound on a single adapter call; None waits indefinitely
    source_timeout_seconds: Optional[float] = 30.0

    default_max_results: int = Field(default=20, ge=1, le=500)
    default_sources: List[str] = Field(default_factory=lambda: ["pubmed", "arxiv"])

    @property
    def PROJECT_NAME(self) -> str:
        return self.project_name

    @property
    def LOG_LEVEL(self) -> str:
        return self.log_level

    @property
    def API_CONTACT_EMAIL(self) -> str:
        return self.api_contact_email

    @property
    def REDIS_HOST(self) -> str:
        return self.redis_host

    @property
    def REDIS_PORT(self) -> int:
        return self.redis_port

    @property
    def HISTORY_KEY(self) -> str:
        return self.history_key

    @property
    def HISTORY_CAPACITY(self) -> int:
        return self.history_capacity

    @property
    def HTTP_TIMEOUT_SECONDS(self) -> float:
        return self.http_timeout_seconds

    @property
    def SOURCE_TIMEOUT_SECONDS(self) -> Optional[float]:
        return self.source_timeout_seconds


settings = Settings()
