"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_API_URL = "http://localhost:3001/api"
DEFAULT_API_TIMEOUT = 10.0


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for selecting the record store backend.

    Attributes:
        backend: Backend identifier (http or sqlalchemy).
        api_url: Base URL of the finance REST API.
        api_timeout: Request timeout in seconds for the HTTP backend.
    """

    backend: str = "http"
    api_url: str = DEFAULT_API_URL
    api_timeout: float = DEFAULT_API_TIMEOUT

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("FINANCE_BACKEND", "http").strip().lower()
        api_url = os.getenv("FINANCE_API_URL", "").strip() or DEFAULT_API_URL
        api_timeout = cls._parse_timeout(
            os.getenv("FINANCE_API_TIMEOUT"),
            logger=logger,
        )
        return cls(backend=backend, api_url=api_url, api_timeout=api_timeout)

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        """Parse the request timeout, falling back to the default.

        Args:
            raw_timeout: Raw timeout string.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_timeout:
            return DEFAULT_API_TIMEOUT
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid FINANCE_API_TIMEOUT {raw_timeout!r}; "
                f"using {DEFAULT_API_TIMEOUT}"
            )
            return DEFAULT_API_TIMEOUT
        if timeout <= 0:
            logger.warning(
                f"FINANCE_API_TIMEOUT must be positive; "
                f"using {DEFAULT_API_TIMEOUT}"
            )
            return DEFAULT_API_TIMEOUT
        return timeout


__all__ = ["FinanceSettings", "DEFAULT_API_URL", "DEFAULT_API_TIMEOUT"]
