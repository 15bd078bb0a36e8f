"""
Unit tests for Deezer Core Service.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from api.deezer.config import DEFAULT_BASE_URL, deezer_config
from api.deezer.core import DeezerService, build_pagination_params
from api.deezer.errors import (
    DeezerAPIError,
    DeezerDecodeError,
    DeezerHTTPError,
    DeezerNotFoundError,
    DeezerTransportError,
)
from api.deezer.models import (
    Album,
    Artist,
    ArtistAlbum,
    Chart,
    CommentConnection,
    FanConnection,
    Genre,
    Infos,
    Track,
)
from api.deezer.resources import upc
from api.deezer.tests.conftest import (
    load_fixture,
    make_response,
    make_session,
    requested_params,
    requested_url,
)

pytestmark = pytest.mark.unit


class TestPaginationParams:
    """Tests for build_pagination_params."""

    def test_no_values_no_params(self):
        assert build_pagination_params() == {}

    def test_limit_only(self):
        assert build_pagination_params(limit=5) == {"limit": "5"}

    def test_limit_and_offset(self):
        assert build_pagination_params(limit=10, offset=20) == {"limit": "10", "offset": "20"}

    def test_zero_offset_is_sent(self):
        assert build_pagination_params(offset=0) == {"offset": "0"}

    @pytest.mark.parametrize("limit", [0, -3])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValueError, match="limit"):
            build_pagination_params(limit=limit)

    def test_negative_offset(self):
        with pytest.raises(ValueError, match="offset"):
            build_pagination_params(offset=-1)


class TestDeezerServiceInit:
    """Tests for DeezerService construction."""

    def test_defaults_from_config(self):
        service = DeezerService(session=MagicMock())

        assert service.base_url == DEFAULT_BASE_URL
        assert service.timeout == 10.0
        assert service.default_headers["Accept"] == "application/json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEEZER_BASE_URL", "http://localhost:8080/")
        monkeypatch.setenv("DEEZER_TIMEOUT", "2.5")
        monkeypatch.setenv("DEEZER_LANGUAGE", "fr")
        deezer_config.reset()

        service = DeezerService(session=MagicMock())

        assert service.base_url == "http://localhost:8080"
        assert service.timeout == 2.5
        assert service.default_headers["Accept-Language"] == "fr"

    def test_constructor_overrides_config(self):
        service = DeezerService(session=MagicMock(), base_url="https://example.test", timeout=1)

        assert service.base_url == "https://example.test"
        assert service.timeout == 1

    def test_invalid_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("DEEZER_TIMEOUT", "soon")
        deezer_config.reset()

        assert DeezerService(session=MagicMock()).timeout == 10.0


class TestFetchById:
    """Tests for DeezerService.fetch_by_id."""

    @pytest.mark.asyncio
    async def test_success(self, album_payload):
        session = make_session(make_response(album_payload))
        service = DeezerService(session=session)

        album = await service.fetch_by_id(Album, 302127)

        assert isinstance(album, Album)
        assert album.id == 302127
        assert requested_url(session) == "https://api.deezer.com/album/302127"
        assert requested_params(session) is None

    @pytest.mark.asyncio
    async def test_alternate_key(self, album_payload):
        session = make_session(make_response(album_payload))
        service = DeezerService(session=session)

        album = await service.fetch_by_id(Album, upc("724384960650"))

        assert album.upc == "724384960650"
        assert requested_url(session) == "https://api.deezer.com/album/upc:724384960650"

    @pytest.mark.asyncio
    async def test_404_is_absent(self):
        session = make_session(make_response(status=404))
        service = DeezerService(session=session)

        assert await service.fetch_by_id(Track, 999999999) is None

    @pytest.mark.asyncio
    async def test_no_data_error_is_absent(self, no_data_payload):
        session = make_session(make_response(no_data_payload))
        service = DeezerService(session=session)

        assert await service.fetch_by_id(Artist, 0) is None

    @pytest.mark.asyncio
    async def test_null_body_raises_decode_error(self):
        service = DeezerService(session=make_session(make_response(None)))

        with pytest.raises(DeezerDecodeError) as exc_info:
            await service.fetch_by_id(Album, 302127)

        assert exc_info.value.url == "https://api.deezer.com/album/302127"

    @pytest.mark.asyncio
    async def test_kind_without_identifier_lookup_rejected(self):
        session = make_session(make_response({}))
        service = DeezerService(session=session)

        with pytest.raises(TypeError):
            await service.fetch_by_id(Chart, 1)

        session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_other_api_error_raises(self, quota_payload):
        session = make_session(make_response(quota_payload))
        service = DeezerService(session=session)

        with pytest.raises(DeezerAPIError) as exc_info:
            await service.fetch_by_id(Artist, 27)

        assert exc_info.value.code == 4
        assert exc_info.value.error_type == "Exception"
        assert exc_info.value.url == "https://api.deezer.com/artist/27"
        assert not exc_info.value.is_no_data

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        session = make_session(make_response(status=503))
        service = DeezerService(session=session)

        with pytest.raises(DeezerHTTPError) as exc_info:
            await service.fetch_by_id(Album, 302127)

        assert exc_info.value.status == 503

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        session = MagicMock()
        session.get.side_effect = aiohttp.ClientConnectionError("connection refused")
        service = DeezerService(session=session)

        with pytest.raises(DeezerTransportError, match="connection refused"):
            await service.fetch_by_id(Album, 302127)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        session = MagicMock()
        session.get.side_effect = asyncio.TimeoutError()
        service = DeezerService(session=session)

        with pytest.raises(DeezerTransportError, match="TimeoutError"):
            await service.fetch_by_id(Album, 302127)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_decode_error(self):
        response = make_response()
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        service = DeezerService(session=make_session(response))

        with pytest.raises(DeezerDecodeError):
            await service.fetch_by_id(Album, 302127)

    @pytest.mark.asyncio
    async def test_wrong_shape_raises_decode_error(self):
        service = DeezerService(session=make_session(make_response({"id": "abc"})))

        with pytest.raises(DeezerDecodeError) as exc_info:
            await service.fetch_by_id(Album, 302127)

        assert exc_info.value.url == "https://api.deezer.com/album/302127"

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        session = MagicMock()
        session.get.side_effect = asyncio.CancelledError()
        service = DeezerService(session=session)

        with pytest.raises(asyncio.CancelledError):
            await service.fetch_by_id(Album, 302127)

    @pytest.mark.asyncio
    async def test_repeated_fetches_compare_equal(self, album_payload):
        session = make_session(make_response(album_payload), make_response(album_payload))
        service = DeezerService(session=session)

        first = await service.fetch_by_id(Album, 302127)
        second = await service.fetch_by_id(Album, 302127)

        assert first == second
        assert session.get.call_count == 2


class TestFetchRequired:
    """Tests for DeezerService.fetch_required."""

    @pytest.mark.asyncio
    async def test_absent_raises_not_found(self):
        service = DeezerService(session=make_session(make_response(status=404)))

        with pytest.raises(DeezerNotFoundError) as exc_info:
            await service.fetch_required(Album, 1)

        assert exc_info.value.status == 404
        assert exc_info.value.url == "https://api.deezer.com/album/1"

    @pytest.mark.asyncio
    async def test_present_returns_model(self, artist_payload):
        service = DeezerService(session=make_session(make_response(artist_payload)))

        artist = await service.fetch_required(Artist, 27)

        assert artist.name == "Daft Punk"

    @pytest.mark.asyncio
    async def test_null_body_is_not_absence(self):
        service = DeezerService(session=make_session(make_response(None)))

        with pytest.raises(DeezerDecodeError):
            await service.fetch_required(Album, 302127)


class TestCollections:
    """Tests for listing, sub-resource and connection dispatch."""

    @pytest.mark.asyncio
    async def test_fetch_all(self):
        session = make_session(make_response(load_fixture("genre_list.json")))
        service = DeezerService(session=session)

        genres = await service.fetch_all(Genre)

        assert [genre.name for genre in genres] == ["All", "Pop", "Dance"]
        assert requested_url(session) == "https://api.deezer.com/genre"
        assert requested_params(session) is None

    @pytest.mark.asyncio
    async def test_fetch_subresource_paginated(self):
        session = make_session(make_response(load_fixture("search_album_eminem.json")))
        service = DeezerService(session=session)

        albums = await service.fetch_subresource(ArtistAlbum, 13, limit=5)

        assert [album.title for album in albums] == ["The Eminem Show", "Recovery"]
        assert requested_url(session) == "https://api.deezer.com/artist/13/albums"
        assert requested_params(session) == {"limit": "5"}

    @pytest.mark.asyncio
    async def test_connection_without_pagination(self):
        session = make_session(make_response(load_fixture("album_302127_comments.json")))
        service = DeezerService(session=session)

        comments = await service.fetch_connection(Album, CommentConnection, 302127)

        assert [comment.id for comment in comments] == [2772704, 2772705]
        assert requested_url(session) == "https://api.deezer.com/album/302127/comments"
        assert requested_params(session) is None

    @pytest.mark.asyncio
    async def test_connection_with_pagination(self):
        session = make_session(make_response(load_fixture("album_302127_fans.json")))
        service = DeezerService(session=session)

        fans = await service.fetch_connection(Album, FanConnection, 302127, limit=2, offset=0)

        assert len(fans) == 2
        assert requested_params(session) == {"limit": "2", "offset": "0"}

    @pytest.mark.asyncio
    async def test_connection_empty_envelope(self):
        service = DeezerService(session=make_session(make_response({"data": []})))

        assert await service.fetch_connection(Album, FanConnection, 302127) == []

    @pytest.mark.asyncio
    async def test_connection_404_raises(self):
        service = DeezerService(session=make_session(make_response(status=404)))

        with pytest.raises(DeezerHTTPError) as exc_info:
            await service.fetch_connection(Album, FanConnection, 999999999)

        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_connection_no_data_error_raises(self, no_data_payload):
        service = DeezerService(session=make_session(make_response(no_data_payload)))

        with pytest.raises(DeezerAPIError) as exc_info:
            await service.fetch_connection(Album, FanConnection, 999999999)

        assert exc_info.value.is_no_data

    @pytest.mark.asyncio
    async def test_missing_envelope_raises_decode_error(self):
        service = DeezerService(session=make_session(make_response({"total": 3})))

        with pytest.raises(DeezerDecodeError):
            await service.fetch_all(Genre)

    @pytest.mark.asyncio
    async def test_invalid_pagination_makes_no_request(self):
        session = make_session(make_response({"data": []}))
        service = DeezerService(session=session)

        with pytest.raises(ValueError):
            await service.fetch_connection(Album, FanConnection, 302127, limit=0)

        session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_connection_on_subclassed_owner(self):
        class LocalAlbum(Album):
            pass

        session = make_session(make_response(load_fixture("album_302127_fans.json")))
        service = DeezerService(session=session)

        fans = await service.fetch_connection(LocalAlbum, FanConnection, 302127)

        assert len(fans) == 2
        assert requested_url(session) == "https://api.deezer.com/album/302127/fans"

    @pytest.mark.asyncio
    async def test_listing_requires_enumerable_kind(self):
        session = make_session(make_response({"data": []}))
        service = DeezerService(session=session)

        with pytest.raises(TypeError):
            await service.fetch_all(Album)

        session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_connection_requires_connectable_owner(self):
        session = make_session(make_response({"data": []}))
        service = DeezerService(session=session)

        with pytest.raises(TypeError):
            await service.fetch_connection(Track, FanConnection, 3135556)

        session.get.assert_not_called()


class TestFetchScalar:
    """Tests for singleton endpoints."""

    @pytest.mark.asyncio
    async def test_infos(self):
        session = make_session(make_response(load_fixture("infos.json")))
        service = DeezerService(session=session)

        infos = await service.fetch_scalar(Infos, "infos")

        assert infos.country == "France"
        assert requested_url(session) == "https://api.deezer.com/infos"

    @pytest.mark.asyncio
    async def test_404_is_not_absent(self):
        service = DeezerService(session=make_session(make_response(status=404)))

        with pytest.raises(DeezerHTTPError):
            await service.fetch_scalar(Infos, "infos")


class TestSessionLifecycle:
    """Tests for session ownership."""

    @pytest.mark.asyncio
    async def test_borrowed_session_not_closed(self):
        session = make_session(make_response({"data": []}))

        async with DeezerService(session=session) as service:
            await service.fetch_all(Genre)

        session.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_owned_session_closed(self):
        with patch("aiohttp.ClientSession") as mock_session_class:
            created = make_session(make_response({"data": []}))
            mock_session_class.return_value = created

            async with DeezerService() as service:
                await service.fetch_all(Genre)

            mock_session_class.assert_called_once()
            created.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_request_sends_timeout_and_headers(self):
        session = make_session(make_response({"data": []}))
        service = DeezerService(session=session, timeout=3)

        await service.fetch_all(Genre)

        kwargs = session.get.call_args.kwargs
        assert kwargs["timeout"].total == 3
        assert kwargs["headers"]["User-Agent"].startswith("deezer-api-client/")

    @pytest.mark.asyncio
    async def test_concurrent_requests(self, album_payload, artist_payload):
        session = make_session(make_response(album_payload), make_response(artist_payload))
        service = DeezerService(session=session)

        album, artist = await asyncio.gather(
            service.fetch_by_id(Album, 302127), service.fetch_by_id(Artist, 27)
        )

        assert album.title == "Discovery"
        assert artist.name == "Daft Punk"


@pytest.mark.asyncio
async def test_error_statuses_drain_body():
    response = make_response(status=500)
    service = DeezerService(session=make_session(response))

    with pytest.raises(DeezerHTTPError):
        await service.fetch_all(Genre)

    response.read.assert_awaited_once()
    response.json.assert_not_called()


@pytest.mark.asyncio
async def test_transport_error_is_chained():
    session = MagicMock()
    error = aiohttp.ServerDisconnectedError()
    session.get.side_effect = error
    service = DeezerService(session=session)

    with pytest.raises(DeezerTransportError) as exc_info:
        await service.fetch_all(Genre)

    assert exc_info.value.__cause__ is error


def test_build_url_joins_paths():
    service = DeezerService(session=AsyncMock())

    assert service.build_url("album/302127") == "https://api.deezer.com/album/302127"
    assert service.build_url("/chart") == "https://api.deezer.com/chart"
