"""
Deezer Sub-Clients - Resource-scoped handles over a DeezerService.

Collection clients (``AlbumsClient``) pick an entity by id or alternate key and
start searches; single-entity clients (``AlbumClient``) bind one identifier and
expose its record and connections. Building a handle never touches the network.

    album = client.albums().upc("724384960650")
    tracks = await album.tracks(limit=10)
"""

from dataclasses import dataclass

from api.deezer.core import DeezerService
from api.deezer.models import (
    Album,
    AlbumTrackConnection,
    Artist,
    ArtistAlbum,
    ArtistConnection,
    CommentConnection,
    FanConnection,
    Genre,
    Playlist,
    PlaylistConnection,
    PlaylistTrackConnection,
    Radio,
    RadioConnection,
    SearchedAlbum,
    SearchedArtist,
    SearchedPlaylist,
    SearchedRadio,
    SearchedTrack,
    SearchedUser,
    TopTrackConnection,
    Track,
    User,
    UserFollower,
    UserFollowing,
)
from api.deezer.resources import Identifier, as_identifier, isrc, upc
from api.deezer.search import SearchClient, SearchQuery


@dataclass(frozen=True)
class _EntityClient:
    client: DeezerService
    identifier: Identifier

    def __post_init__(self) -> None:
        object.__setattr__(self, "identifier", as_identifier(self.identifier))


# ============================================================================
# Albums
# ============================================================================


@dataclass(frozen=True)
class AlbumClient(_EntityClient):
    """One album, by id or UPC."""

    async def get(self) -> Album | None:
        return await self.client.fetch_by_id(Album, self.identifier)

    async def comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentConnection]:
        return await self.client.fetch_connection(
            Album, CommentConnection, self.identifier, limit, offset
        )

    async def fans(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[FanConnection]:
        return await self.client.fetch_connection(
            Album, FanConnection, self.identifier, limit, offset
        )

    async def tracks(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[AlbumTrackConnection]:
        return await self.client.fetch_connection(
            Album, AlbumTrackConnection, self.identifier, limit, offset
        )


@dataclass(frozen=True)
class AlbumsClient:
    client: DeezerService

    def id(self, album_id: int) -> AlbumClient:
        return AlbumClient(self.client, album_id)

    def upc(self, code: str) -> AlbumClient:
        """Album addressed by its UPC barcode (``album/upc:<code>``)."""
        return AlbumClient(self.client, upc(code))

    def search(self, query: str) -> SearchClient[SearchedAlbum]:
        return SearchClient(self.client, SearchedAlbum, SearchQuery(query))


# ============================================================================
# Artists
# ============================================================================


@dataclass(frozen=True)
class ArtistClient(_EntityClient):
    """One artist."""

    async def get(self) -> Artist | None:
        return await self.client.fetch_by_id(Artist, self.identifier)

    async def albums(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[ArtistAlbum]:
        return await self.client.fetch_connection(
            Artist, ArtistAlbum, self.identifier, limit, offset
        )

    async def top(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[TopTrackConnection]:
        """The artist's most popular tracks (5 unless a limit is given)."""
        return await self.client.fetch_connection(
            Artist, TopTrackConnection, self.identifier, limit, offset
        )

    async def related(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[ArtistConnection]:
        return await self.client.fetch_connection(
            Artist, ArtistConnection, self.identifier, limit, offset
        )

    async def fans(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[FanConnection]:
        return await self.client.fetch_connection(
            Artist, FanConnection, self.identifier, limit, offset
        )

    async def playlists(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[PlaylistConnection]:
        return await self.client.fetch_connection(
            Artist, PlaylistConnection, self.identifier, limit, offset
        )

    async def comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentConnection]:
        return await self.client.fetch_connection(
            Artist, CommentConnection, self.identifier, limit, offset
        )


@dataclass(frozen=True)
class ArtistsClient:
    client: DeezerService

    def id(self, artist_id: int) -> ArtistClient:
        return ArtistClient(self.client, artist_id)

    def search(self, query: str) -> SearchClient[SearchedArtist]:
        return SearchClient(self.client, SearchedArtist, SearchQuery(query))


# ============================================================================
# Tracks
# ============================================================================


@dataclass(frozen=True)
class TrackClient(_EntityClient):
    """One track, by id or ISRC."""

    async def get(self) -> Track | None:
        return await self.client.fetch_by_id(Track, self.identifier)


@dataclass(frozen=True)
class TracksClient:
    client: DeezerService

    def id(self, track_id: int) -> TrackClient:
        return TrackClient(self.client, track_id)

    def isrc(self, code: str) -> TrackClient:
        """Track addressed by its ISRC (``track/isrc:<code>``)."""
        return TrackClient(self.client, isrc(code))

    def search(self, query: str) -> SearchClient[SearchedTrack]:
        return SearchClient(self.client, SearchedTrack, SearchQuery(query))


# ============================================================================
# Playlists
# ============================================================================


@dataclass(frozen=True)
class PlaylistClient(_EntityClient):
    async def get(self) -> Playlist | None:
        return await self.client.fetch_by_id(Playlist, self.identifier)

    async def tracks(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[PlaylistTrackConnection]:
        return await self.client.fetch_connection(
            Playlist, PlaylistTrackConnection, self.identifier, limit, offset
        )

    async def fans(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[FanConnection]:
        return await self.client.fetch_connection(
            Playlist, FanConnection, self.identifier, limit, offset
        )

    async def comments(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[CommentConnection]:
        return await self.client.fetch_connection(
            Playlist, CommentConnection, self.identifier, limit, offset
        )


@dataclass(frozen=True)
class PlaylistsClient:
    client: DeezerService

    def id(self, playlist_id: int) -> PlaylistClient:
        return PlaylistClient(self.client, playlist_id)

    def search(self, query: str) -> SearchClient[SearchedPlaylist]:
        return SearchClient(self.client, SearchedPlaylist, SearchQuery(query))


# ============================================================================
# Users
# ============================================================================


@dataclass(frozen=True)
class UserClient(_EntityClient):
    async def get(self) -> User | None:
        return await self.client.fetch_by_id(User, self.identifier)

    async def playlists(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[PlaylistConnection]:
        return await self.client.fetch_connection(
            User, PlaylistConnection, self.identifier, limit, offset
        )

    async def followings(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[UserFollowing]:
        return await self.client.fetch_connection(
            User, UserFollowing, self.identifier, limit, offset
        )

    async def followers(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[UserFollower]:
        return await self.client.fetch_connection(
            User, UserFollower, self.identifier, limit, offset
        )


@dataclass(frozen=True)
class UsersClient:
    client: DeezerService

    def id(self, user_id: int) -> UserClient:
        return UserClient(self.client, user_id)

    def search(self, query: str) -> SearchClient[SearchedUser]:
        return SearchClient(self.client, SearchedUser, SearchQuery(query))


# ============================================================================
# Genres
# ============================================================================


@dataclass(frozen=True)
class GenreClient(_EntityClient):
    async def get(self) -> Genre | None:
        return await self.client.fetch_by_id(Genre, self.identifier)

    async def artists(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[ArtistConnection]:
        return await self.client.fetch_connection(
            Genre, ArtistConnection, self.identifier, limit, offset
        )

    async def radios(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[RadioConnection]:
        return await self.client.fetch_connection(
            Genre, RadioConnection, self.identifier, limit, offset
        )


@dataclass(frozen=True)
class GenresClient:
    client: DeezerService

    def id(self, genre_id: int) -> GenreClient:
        return GenreClient(self.client, genre_id)

    async def all(self) -> list[Genre]:
        return await self.client.fetch_all(Genre)


# ============================================================================
# Radios
# ============================================================================


@dataclass(frozen=True)
class RadioClient(_EntityClient):
    async def get(self) -> Radio | None:
        return await self.client.fetch_by_id(Radio, self.identifier)

    async def tracks(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[TopTrackConnection]:
        return await self.client.fetch_connection(
            Radio, TopTrackConnection, self.identifier, limit, offset
        )


@dataclass(frozen=True)
class RadiosClient:
    client: DeezerService

    def id(self, radio_id: int) -> RadioClient:
        return RadioClient(self.client, radio_id)

    async def all(self) -> list[Radio]:
        return await self.client.fetch_all(Radio)

    def search(self, query: str) -> SearchClient[SearchedRadio]:
        return SearchClient(self.client, SearchedRadio, SearchQuery(query))
