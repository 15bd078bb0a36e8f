"""
Deezer Core Service - Request dispatch and typed decoding for the Deezer API.

One dispatcher serves every resource kind: models describe their URLs through the
mixins in resources.py, and this service only joins paths onto the configured
origin, issues the GET and decodes the answer.
"""

import json
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from api.deezer.config import deezer_config
from api.deezer.errors import (
    DeezerAPIError,
    DeezerDecodeError,
    DeezerHTTPError,
    DeezerNotFoundError,
    DeezerTransportError,
)
from api.deezer.resources import (
    Connectable,
    DeezerConnectable,
    DeezerEnumerable,
    DeezerObject,
    Enumerable,
    Identifiable,
    Identifier,
    as_identifier,
    unwrap_envelope,
)
from utils.base_api_client import BaseAPIClient, SessionProtocol
from utils.get_logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
ObjectT = TypeVar("ObjectT", bound=DeezerObject)
EnumerableT = TypeVar("EnumerableT", bound=DeezerEnumerable)

# Returned by _get when an identifier lookup finds nothing
_ABSENT = object()


def _require(model: type, capability: type, operation: str) -> None:
    if not isinstance(model, capability):
        raise TypeError(f"{model.__name__} does not support {operation}")


def build_pagination_params(limit: int | None = None, offset: int | None = None) -> dict[str, str]:
    """Query parameters for a paginated collection; absent values are omitted.

    Raises:
        ValueError: limit below 1 or offset below 0
    """
    params: dict[str, str] = {}
    if limit is not None:
        if isinstance(limit, bool) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        params["limit"] = str(limit)
    if offset is not None:
        if isinstance(offset, bool) or offset < 0:
            raise ValueError(f"offset must not be negative, got {offset!r}")
        params["offset"] = str(offset)
    return params


class DeezerService(BaseAPIClient):
    """
    Core Deezer service for API communication.
    Every public call is one GET; no retries, no caching.
    """

    def __init__(
        self,
        session: SessionProtocol | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Args:
            session: Shared aiohttp ClientSession (or a test double)
            base_url: API origin, defaults to DEEZER_BASE_URL
            timeout: Total request timeout in seconds, defaults to DEEZER_TIMEOUT
        """
        super().__init__(
            session=session,
            timeout=timeout if timeout is not None else deezer_config.timeout,
            headers=deezer_config.get_headers(),
        )
        self.base_url = (base_url or deezer_config.base_url).rstrip("/")

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(
        self,
        path: str,
        params: dict[str, str] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """Issue one GET for ``path`` and return the parsed JSON body.

        Args:
            path: Path relative to the API origin (e.g. 'album/302127')
            params: Query parameters
            allow_not_found: Return _ABSENT for a 404 or an in-body "no data" error
                instead of raising

        Returns:
            Parsed JSON (possibly None), or _ABSENT when the resource is absent
            and allow_not_found is set

        Raises:
            DeezerTransportError: connection failure or timeout
            DeezerHTTPError: status outside the success range
            DeezerAPIError: error object in the response body
            DeezerDecodeError: body is not JSON
        """
        url = self.build_url(path)
        try:
            data, status = await self._core_async_request(url, params=params)
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Deezer request to {url} failed: {e}")
            raise DeezerTransportError(url, str(e) or type(e).__name__) from e
        except json.JSONDecodeError as e:
            logger.warning(f"Deezer returned invalid JSON for {url}: {e}")
            raise DeezerDecodeError(url, str(e)) from e

        if status == 404 and allow_not_found:
            logger.debug(f"Deezer resource not found: {url}")
            return _ABSENT
        if not 200 <= status < 300:
            raise DeezerHTTPError(status, url)

        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            error = data["error"]
            api_error = DeezerAPIError(
                status,
                url,
                code=error.get("code"),
                error_type=error.get("type"),
                message=error.get("message"),
            )
            if api_error.is_no_data and allow_not_found:
                logger.debug(f"Deezer has no data for {url}")
                return _ABSENT
            logger.warning(f"Deezer API error for {url}: {api_error}")
            raise api_error

        return data

    def _decode(self, model: type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Could not decode {model.__name__} from {path}: {e}")
            raise DeezerDecodeError(self.build_url(path), str(e)) from e

    def _decode_list(self, model: type[ModelT], data: Any, path: str) -> list[ModelT]:
        try:
            return unwrap_envelope(data, model)
        except ValidationError as e:
            logger.warning(f"Could not decode list of {model.__name__} from {path}: {e}")
            raise DeezerDecodeError(self.build_url(path), str(e)) from e

    # ------------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------------

    async def fetch_from_url(self, model: type[ModelT], path: str) -> ModelT | None:
        """Fetch one entity from a prebuilt path; None when absent."""
        data = await self._get(path, allow_not_found=True)
        if data is _ABSENT:
            return None
        return self._decode(model, data, path)

    async def fetch_by_id(
        self, model: type[ObjectT], identifier: Identifier | int
    ) -> ObjectT | None:
        """Fetch the entity of kind ``model`` named by ``identifier``.

        Returns:
            The decoded entity, or None when Deezer has no such resource
        """
        _require(model, Identifiable, "lookup by identifier")
        return await self.fetch_from_url(model, model.get_api_url(identifier))

    async def fetch_required(
        self, model: type[ObjectT], identifier: Identifier | int
    ) -> ObjectT:
        """Like fetch_by_id, but an absent entity raises DeezerNotFoundError."""
        _require(model, Identifiable, "lookup by identifier")
        path = model.get_api_url(identifier)
        result = await self.fetch_from_url(model, path)
        if result is None:
            raise DeezerNotFoundError(self.build_url(path))
        return result

    async def fetch_array(
        self, model: type[ModelT], path: str, params: dict[str, str] | None = None
    ) -> list[ModelT]:
        """Fetch an enveloped collection at ``path`` and decode its items."""
        data = await self._get(path, params=params)
        return self._decode_list(model, data, path)

    async def fetch_all(self, model: type[EnumerableT]) -> list[EnumerableT]:
        """List every entity of an enumerable kind (genres, radios, editorials)."""
        _require(model, Enumerable, "listing")
        return await self.fetch_array(model, model.get_all_api_url())

    async def fetch_subresource(
        self,
        model: type[ObjectT],
        identifier: Identifier | int,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ObjectT]:
        """Fetch a paginated collection whose own path template takes the identifier."""
        _require(model, Identifiable, "lookup by identifier")
        params = build_pagination_params(limit, offset)
        return await self.fetch_array(model, model.get_api_url(identifier), params)

    async def fetch_connection(
        self,
        owner: type[DeezerConnectable],
        child: type[ModelT],
        identifier: Identifier | int,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ModelT]:
        """Fetch the ``child`` collection of the ``owner`` entity named by ``identifier``.

        A 404 here is not treated as absence; it raises DeezerHTTPError.
        """
        _require(owner, Connectable, "connections")
        params = build_pagination_params(limit, offset)
        path = owner.get_connection_url(child, as_identifier(identifier).serialize())
        return await self.fetch_array(child, path, params)

    async def fetch_scalar(self, model: type[ModelT], path: str) -> ModelT:
        """Fetch a singleton resource (``infos``, ``options``, ``chart``)."""
        data = await self._get(path)
        return self._decode(model, data, path)
