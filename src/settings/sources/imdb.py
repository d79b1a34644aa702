"""IMDb website configuration settings.

Single source: HTML title pages, search results and the top 250 chart.
"""

from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IMDBSettings(BaseSettings):
    """IMDb scraping configuration.

    Attributes:
        base_url: IMDb website base URL (no trailing slash).
        timeout: Request timeout (seconds).
        user_agent: HTTP User-Agent for requests.
        accept_language: Accept-Language header, keeps pages in English.
    """

    base_url: str = Field(
        default="http://www.imdb.com",
        alias="IMDB_BASE_URL",
    )
    timeout: float = Field(default=30.0, alias="IMDB_TIMEOUT")
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        alias="IMDB_USER_AGENT",
    )
    accept_language: str = Field(
        default="en-US,en;q=0.9",
        alias="IMDB_ACCEPT_LANGUAGE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("IMDB_TIMEOUT must be positive")
        return v

    def title_url(self, imdb_id: str) -> str:
        """Build the title page URL for an IMDb id.

        Args:
            imdb_id: Digits of the IMDb id, without the "tt" prefix.

        Returns:
            Complete title page URL.
        """
        return f"{self.base_url}/title/tt{imdb_id}/"

    def search_url(self, query: str) -> str:
        """Build the title search URL for a free text query.

        Args:
            query: Search terms.

        Returns:
            Complete search URL restricted to titles.
        """
        return f"{self.base_url}/find?q={quote_plus(query)};s=tt"

    @property
    def top_250_url(self) -> str:
        """Top 250 chart URL."""
        return f"{self.base_url}/chart/top"

    @property
    def headers(self) -> dict[str, str]:
        """Default HTTP headers for page requests."""
        return {
            "User-Agent": self.user_agent,
            "Accept-Language": self.accept_language,
        }
