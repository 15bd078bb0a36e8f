"""
Deezer Client - Convenience facade over DeezerService.

    async with DeezerClient() as client:
        album = await client.album(302127)
        fans = await client.albums().id(302127).fans(limit=5)
        hits = await client.search(SearchedArtist, "daft punk").send()
"""

from api.deezer.clients import (
    AlbumsClient,
    ArtistsClient,
    GenresClient,
    PlaylistsClient,
    RadiosClient,
    TracksClient,
    UsersClient,
)
from api.deezer.core import DeezerService
from api.deezer.models import (
    Album,
    Artist,
    ArtistAlbum,
    Chart,
    Comment,
    Editorial,
    Genre,
    Infos,
    Options,
    Playlist,
    Radio,
    Track,
    User,
)
from api.deezer.resources import Identifier
from api.deezer.search import SearchClient, SearchOrder, SearchQuery, SearchT


class DeezerClient(DeezerService):
    """
    Entry point for the Deezer API.
    Adds one shortcut per resource kind and the sub-client factories.
    """

    # ------------------------------------------------------------------------
    # By identifier
    # ------------------------------------------------------------------------

    async def album(self, identifier: Identifier | int) -> Album | None:
        return await self.fetch_by_id(Album, identifier)

    async def artist(self, identifier: Identifier | int) -> Artist | None:
        return await self.fetch_by_id(Artist, identifier)

    async def artist_albums(
        self,
        identifier: Identifier | int,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ArtistAlbum]:
        """Albums of an artist, paginated."""
        return await self.fetch_subresource(ArtistAlbum, identifier, limit, offset)

    async def comment(self, identifier: Identifier | int) -> Comment | None:
        return await self.fetch_by_id(Comment, identifier)

    async def editorial(self, identifier: Identifier | int) -> Editorial | None:
        return await self.fetch_by_id(Editorial, identifier)

    async def genre(self, identifier: Identifier | int) -> Genre | None:
        return await self.fetch_by_id(Genre, identifier)

    async def playlist(self, identifier: Identifier | int) -> Playlist | None:
        return await self.fetch_by_id(Playlist, identifier)

    async def radio(self, identifier: Identifier | int) -> Radio | None:
        return await self.fetch_by_id(Radio, identifier)

    async def track(self, identifier: Identifier | int) -> Track | None:
        return await self.fetch_by_id(Track, identifier)

    async def user(self, identifier: Identifier | int) -> User | None:
        return await self.fetch_by_id(User, identifier)

    # ------------------------------------------------------------------------
    # Listings and singletons
    # ------------------------------------------------------------------------

    async def editorials(self) -> list[Editorial]:
        return await self.fetch_all(Editorial)

    async def genres(self) -> list[Genre]:
        return await self.fetch_all(Genre)

    async def radios(self) -> list[Radio]:
        return await self.fetch_all(Radio)

    async def api_info(self) -> Infos:
        """Country, availability and offers as seen from the caller's location."""
        return await self.fetch_scalar(Infos, "infos")

    async def charts(self, genre_id: int | None = None) -> Chart:
        """Top charts overall, or for one genre."""
        path = "chart" if genre_id is None else f"chart/{genre_id}"
        return await self.fetch_scalar(Chart, path)

    async def user_options(self) -> Options:
        return await self.fetch_scalar(Options, "options")

    # ------------------------------------------------------------------------
    # Sub-clients
    # ------------------------------------------------------------------------

    def albums(self) -> AlbumsClient:
        return AlbumsClient(self)

    def artists(self) -> ArtistsClient:
        return ArtistsClient(self)

    def tracks(self) -> TracksClient:
        return TracksClient(self)

    def playlists(self) -> PlaylistsClient:
        return PlaylistsClient(self)

    def users(self) -> UsersClient:
        return UsersClient(self)

    def genres_client(self) -> GenresClient:
        return GenresClient(self)

    def radios_client(self) -> RadiosClient:
        return RadiosClient(self)

    def search(
        self,
        model: type[SearchT],
        query: str,
        strict: bool = False,
        order: SearchOrder = SearchOrder.RANKING,
    ) -> SearchClient[SearchT]:
        """Start a search whose results decode as ``model`` (e.g. SearchedTrack)."""
        return SearchClient(self, model, SearchQuery(query, strict=strict, order=SearchOrder(order)))
