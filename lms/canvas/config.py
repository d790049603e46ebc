"""Client configuration.

A ``CanvasConfig`` is built once and handed to the client explicitly; there
is no process-wide default instance.

Environment variables read by ``CanvasConfig.from_env``:

- ``CANVAS_BASE_URL`` (required), e.g. ``https://canvas.example.edu``
- ``CANVAS_API_TOKEN`` (required)
- ``CANVAS_API_VERSION`` (default ``v1``)
- ``CANVAS_TIMEOUT`` seconds (default 30)
- ``CANVAS_PER_PAGE`` items per page (default: server decides)
- ``CANVAS_MAX_PAGES`` traversal ceiling (default: unlimited)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.exceptions import ConfigurationError
from .runtime.rest.auth import bearer_auth_header

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT = 30.0

_API_PATH = re.compile(r"/api/v\d+(/|$)")


class CanvasSettings(BaseSettings):
    """``CANVAS_*`` environment variables, typed. Empty values count as unset."""

    model_config = SettingsConfigDict(
        env_prefix="CANVAS_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    base_url: str
    api_token: SecretStr
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    per_page: int | None = None
    max_pages: int | None = None


@dataclass(frozen=True)
class CanvasConfig:
    base_url: str
    api_token: str = field(repr=False)
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    per_page: int | None = None
    max_pages: int | None = None  # None means unlimited

    def __post_init__(self) -> None:
        """Validate configuration."""
        base_url = self.base_url.strip().rstrip("/")
        if not base_url:
            raise ConfigurationError("base_url must not be empty")
        if "://" not in base_url:
            raise ConfigurationError(f"base_url must include a scheme: {base_url!r}")
        if base_url.startswith("http://"):
            logger.warning("Canvas base_url uses plain http", extra={"base_url": base_url})
        if _API_PATH.search(base_url):
            logger.warning(
                "Canvas base_url already contains an API path; it will be added again",
                extra={"base_url": base_url},
            )
        object.__setattr__(self, "base_url", base_url)

        # Raises ConfigurationError for tokens that cannot go in a header
        bearer_auth_header(self.api_token)

        if not self.api_version:
            raise ConfigurationError("api_version must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.per_page is not None and self.per_page <= 0:
            raise ConfigurationError("per_page must be positive")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ConfigurationError("max_pages must be positive")

    @property
    def api_root(self) -> str:
        return f"{self.base_url}/api/{self.api_version}"

    @classmethod
    def from_env(cls) -> CanvasConfig:
        """Build a configuration from ``CANVAS_*`` environment variables.

        Raises:
            ConfigurationError: If a required variable is missing or a
                numeric variable does not parse
        """
        try:
            settings = CanvasSettings()
        except ValidationError as exc:
            problems = "; ".join(
                f"CANVAS_{'_'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigurationError(f"Invalid Canvas environment: {problems}") from exc

        return cls(
            base_url=settings.base_url,
            api_token=settings.api_token.get_secret_value(),
            api_version=settings.api_version,
            timeout=settings.timeout,
            per_page=settings.per_page,
            max_pages=settings.max_pages,
        )
