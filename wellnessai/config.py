"""Client configuration with environment variable loading.

Pydantic-based configuration for the WellnessAI client.
Values default to environment variables (optionally from a .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> float | None:
    value = os.getenv(name, "").strip()
    return float(value) if value else None


class StreamPacing(BaseModel):
    """Timing for the simulated word-by-word reveal of chat replies.

    Attributes:
        min_delay: Lower bound of the random pause between words (seconds).
        max_delay: Upper bound of the random pause between words (seconds).
        sentence_pause: Extra pause after a word ending in . ! or ?
        clause_pause: Extra pause after a word ending in , ; or :
    """

    min_delay: float = Field(default=0.03, ge=0.0)
    max_delay: float = Field(default=0.08, ge=0.0)
    sentence_pause: float = Field(default=0.25, ge=0.0)
    clause_pause: float = Field(default=0.1, ge=0.0)

    @model_validator(mode="after")
    def check_delay_range(self) -> "StreamPacing":
        """Ensure the random delay range is not inverted."""
        if self.max_delay < self.min_delay:
            raise ValueError("max_delay must be greater than or equal to min_delay")
        return self


class ClientConfig(BaseModel):
    """Configuration for the WellnessAI client.

    Attributes:
        api_base_url: Base URL of the WellnessAI REST API.
        storage_path: JSON file for persisted session data (None keeps it in memory).
        use_mock_api: Route all requests to the in-process mock backend.
        request_timeout: Per-request timeout in seconds (None disables it).
        stream_pacing: Timing of the simulated chat reveal.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("WELLNESS_API_BASE_URL", "http://localhost:8000"),
        description="Base URL of the REST API",
    )
    storage_path: Path | None = Field(
        default_factory=lambda: (
            Path(os.environ["WELLNESS_STORAGE_PATH"]) if os.getenv("WELLNESS_STORAGE_PATH") else None
        ),
        description="Where the session token is persisted",
    )
    use_mock_api: bool = Field(
        default_factory=lambda: _env_flag("WELLNESS_USE_MOCK_API"),
        description="Serve requests from the bundled mock backend",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: _env_float("WELLNESS_REQUEST_TIMEOUT"),
        gt=0.0,
        description="Request timeout in seconds",
    )
    stream_pacing: StreamPacing = Field(default_factory=StreamPacing)

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate that the base URL is set and drop any trailing slash."""
        if not v or not v.strip():
            raise ValueError("API base URL required. Set WELLNESS_API_BASE_URL in .env")
        return v.strip().rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If the base URL is empty.
    """
    return ClientConfig()
