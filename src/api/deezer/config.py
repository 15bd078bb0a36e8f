"""
Deezer Config Service - Centralized settings for the Deezer API client.
Reads the environment lazily so tests and local .env files can set values
before first use.
"""

import os

from utils.get_logger import get_logger

logger = get_logger(__name__)

__version__ = "0.3.0"

DEFAULT_BASE_URL = "https://api.deezer.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"deezer-api-client/{__version__}"


class DeezerConfig:
    """
    Deezer client configuration.
    The public API needs no credentials, so this only carries transport settings.
    """

    def __init__(self):
        self._base_url: str | None = None
        self._timeout: float | None = None
        self._user_agent: str | None = None
        self._language: str | None = None

    @property
    def base_url(self) -> str:
        """API origin, without trailing slash."""
        if self._base_url is None:
            self._base_url = os.getenv("DEEZER_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
            logger.debug(f"Using Deezer base url {self._base_url}")
        return self._base_url

    @property
    def timeout(self) -> float:
        """Total request timeout in seconds."""
        if self._timeout is None:
            raw = os.getenv("DEEZER_TIMEOUT")
            try:
                self._timeout = float(raw) if raw else DEFAULT_TIMEOUT
            except ValueError:
                logger.warning(f"Invalid DEEZER_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}")
                self._timeout = DEFAULT_TIMEOUT
        return self._timeout

    @property
    def user_agent(self) -> str:
        if self._user_agent is None:
            self._user_agent = os.getenv("DEEZER_USER_AGENT", DEFAULT_USER_AGENT)
        return self._user_agent

    @property
    def language(self) -> str | None:
        """Optional Accept-Language for localized titles."""
        if self._language is None:
            self._language = os.getenv("DEEZER_LANGUAGE") or ""
        return self._language or None

    def get_headers(self) -> dict[str, str]:
        """Default headers sent with every request."""
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        if self.language:
            headers["Accept-Language"] = self.language
        return headers

    def reset(self) -> None:
        """Forget resolved values so the environment is read again."""
        self.__init__()


# Singleton instance for use across the application
deezer_config = DeezerConfig()
