"""
Base API Client - Shared request handling over one pooled aiohttp session.
API services inherit from this and broker their calls through _core_async_request.

The client makes exactly one attempt per call. Status interpretation is left to
the service: the primitive only reports what the server answered.
"""

from types import TracebackType
from typing import Any, Protocol

import aiohttp

from utils.get_logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class SessionProtocol(Protocol):
    """The subset of aiohttp.ClientSession used by BaseAPIClient (real or mocked)."""

    def get(self, url: str, **kwargs: Any) -> Any: ...

    async def close(self) -> None: ...


class BaseAPIClient:
    """
    Base class for API clients with shared request handling.
    Owns (or borrows) the connection pool and exposes a single GET primitive.
    """

    def __init__(
        self,
        session: SessionProtocol | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ):
        """
        Args:
            session: Existing aiohttp ClientSession to share. When omitted a session
                is created on first use and closed by close().
            timeout: Total request timeout in seconds
            headers: Headers sent with every request
        """
        self._session = session
        self._owns_session = session is None
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.default_headers = dict(headers or {})

    @property
    def session(self) -> SessionProtocol:
        """Lazy-create the pooled session on first use."""
        if self._session is None:
            self._session = aiohttp.ClientSession(headers=self.default_headers)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "BaseAPIClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _core_async_request(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> tuple[Any | None, int]:
        """
        Make a single async GET request.

        Transport failures (aiohttp.ClientError, TimeoutError) and JSON parse errors
        propagate to the caller. Cancellation propagates as well; the response is
        always released back to the pool by the context manager.

        Args:
            url: Absolute request URL
            params: Query parameters, sent URL-encoded
            headers: Extra headers for this request
            timeout: Total timeout in seconds (default: self.timeout)

        Returns:
            tuple: (parsed JSON | None, status_code). The body is only parsed for
            2xx responses; it is None otherwise.
        """
        request_timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else self.timeout
        )
        request_headers = {**self.default_headers, **(headers or {})}

        async with self.session.get(
            url,
            params=params or None,
            headers=request_headers,
            timeout=request_timeout,
        ) as response:
            status = response.status

            if not 200 <= status < 300:
                if status == 404:
                    logger.debug(f"API returned status {status} for {url} (resource not found)")
                else:
                    logger.warning(f"API returned status {status} for {url}")
                # Drain the body so the connection goes back to the pool
                await response.read()
                return None, status

            data = await response.json(content_type=None)

        return data, status
