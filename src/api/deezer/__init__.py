"""
Deezer Service Package - Typed async client for the public Deezer API.

This package provides:
- DeezerClient: Facade with one shortcut per resource kind
- DeezerService: Core dispatcher (by id, listings, connections, singletons)
- Sub-clients and the SearchClient builder
- Models: Pydantic models for type-safe data structures
"""

from api.deezer.client import DeezerClient
from api.deezer.clients import (
    AlbumClient,
    AlbumsClient,
    ArtistClient,
    ArtistsClient,
    GenreClient,
    GenresClient,
    PlaylistClient,
    PlaylistsClient,
    RadioClient,
    RadiosClient,
    TrackClient,
    TracksClient,
    UserClient,
    UsersClient,
)
from api.deezer.config import DeezerConfig, __version__, deezer_config
from api.deezer.core import DeezerService, build_pagination_params
from api.deezer.errors import (
    DeezerAPIError,
    DeezerDecodeError,
    DeezerError,
    DeezerHTTPError,
    DeezerNotFoundError,
    DeezerTransportError,
)
from api.deezer.models import (
    Album,
    AlbumSummary,
    AlbumTrackConnection,
    Artist,
    ArtistAlbum,
    ArtistConnection,
    ArtistSummary,
    Chart,
    Comment,
    CommentConnection,
    Editorial,
    FanConnection,
    Genre,
    Infos,
    Options,
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
    TrackSummary,
    User,
    UserFollower,
    UserFollowing,
)
from api.deezer.resources import (
    AlternateKey,
    DeezerArray,
    NumericId,
    connection,
    isrc,
    unwrap_envelope,
    upc,
)
from api.deezer.search import SearchClient, SearchOrder, SearchQuery, SearchResource

__all__ = [
    # Core
    "DeezerClient",
    "DeezerService",
    "build_pagination_params",
    # Config
    "DeezerConfig",
    "deezer_config",
    "__version__",
    # Sub-clients
    "AlbumClient",
    "AlbumsClient",
    "ArtistClient",
    "ArtistsClient",
    "GenreClient",
    "GenresClient",
    "PlaylistClient",
    "PlaylistsClient",
    "RadioClient",
    "RadiosClient",
    "TrackClient",
    "TracksClient",
    "UserClient",
    "UsersClient",
    # Search
    "SearchClient",
    "SearchOrder",
    "SearchQuery",
    "SearchResource",
    # Resources
    "AlternateKey",
    "DeezerArray",
    "NumericId",
    "connection",
    "isrc",
    "unwrap_envelope",
    "upc",
    # Errors
    "DeezerError",
    "DeezerTransportError",
    "DeezerHTTPError",
    "DeezerNotFoundError",
    "DeezerAPIError",
    "DeezerDecodeError",
    # Models
    "Album",
    "AlbumSummary",
    "AlbumTrackConnection",
    "Artist",
    "ArtistAlbum",
    "ArtistConnection",
    "ArtistSummary",
    "Chart",
    "Comment",
    "CommentConnection",
    "Editorial",
    "FanConnection",
    "Genre",
    "Infos",
    "Options",
    "Playlist",
    "PlaylistConnection",
    "PlaylistTrackConnection",
    "Radio",
    "RadioConnection",
    "SearchedAlbum",
    "SearchedArtist",
    "SearchedPlaylist",
    "SearchedRadio",
    "SearchedTrack",
    "SearchedUser",
    "TopTrackConnection",
    "Track",
    "TrackSummary",
    "User",
    "UserFollower",
    "UserFollowing",
]
