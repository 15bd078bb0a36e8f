"""
Deezer Models - Pydantic models for Deezer API data structures
Follows Pydantic 2.0 patterns; every model is frozen and built only by decoding.

Full models (Album, Artist, Track, ...) are addressable by id. Summary models are
the subsets the API embeds in other responses; they carry the foreign id and
``get_full(client)`` fetches the full record with the client passed in.
"""

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field

from api.deezer.resources import (
    DeezerConnectable,
    DeezerEnumerable,
    DeezerList,
    DeezerModel,
    DeezerObject,
    connection,
)
from api.deezer.search import SearchResource

if TYPE_CHECKING:
    from api.deezer.core import DeezerService


# ============================================================================
# Lazy resolution of summaries
# ============================================================================


class ArtistReference:
    async def get_full(self, client: "DeezerService") -> "Artist":
        """Fetch the full Artist this summary points to."""
        return await client.fetch_required(Artist, self.id)  # type: ignore[attr-defined]


class AlbumReference:
    async def get_full(self, client: "DeezerService") -> "Album":
        """Fetch the full Album this summary points to."""
        return await client.fetch_required(Album, self.id)  # type: ignore[attr-defined]


class TrackReference:
    async def get_full(self, client: "DeezerService") -> "Track":
        """Fetch the full Track this summary points to."""
        return await client.fetch_required(Track, self.id)  # type: ignore[attr-defined]


class PlaylistReference:
    async def get_full(self, client: "DeezerService") -> "Playlist":
        """Fetch the full Playlist this summary points to."""
        return await client.fetch_required(Playlist, self.id)  # type: ignore[attr-defined]


class UserReference:
    async def get_full(self, client: "DeezerService") -> "User":
        """Fetch the full User this summary points to."""
        return await client.fetch_required(User, self.id)  # type: ignore[attr-defined]


class GenreReference:
    async def get_full(self, client: "DeezerService") -> "Genre":
        return await client.fetch_required(Genre, self.id)  # type: ignore[attr-defined]


class RadioReference:
    async def get_full(self, client: "DeezerService") -> "Radio":
        return await client.fetch_required(Radio, self.id)  # type: ignore[attr-defined]


class CommentReference:
    async def get_full(self, client: "DeezerService") -> "Comment":
        return await client.fetch_required(Comment, self.id)  # type: ignore[attr-defined]


# ============================================================================
# Summary models
# ============================================================================


class ArtistSummary(ArtistReference, DeezerModel):
    """Subset of Artist embedded in albums, tracks, charts and search results."""

    id: int
    name: str
    link: str = ""
    share_link: str = Field(default="", alias="share")
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    nb_album: int | None = None
    nb_fan: int | None = None
    has_radio: bool = Field(default=False, alias="radio")
    tracklist: str = ""


class ContributorArtist(ArtistSummary):
    """Artist credited on an album or track."""

    role: str = ""


class GenreSummary(GenreReference, DeezerModel):
    """Subset of Genre listed on an album."""

    id: int
    name: str
    picture: str = ""


class AlbumSummary(AlbumReference, DeezerModel):
    """Subset of Album embedded in tracks, charts and search results."""

    id: int
    title: str
    link: str = ""
    cover: str = ""
    cover_small: str = ""
    cover_medium: str = ""
    cover_big: str = ""
    cover_xl: str = ""
    md5_image: str = ""
    genre_id: int | None = None
    nb_tracks: int | None = None
    fans: int | None = None
    release_date: str = ""
    record_type: str = ""
    tracklist: str = ""
    has_explicit_lyrics: bool = Field(default=False, alias="explicit_lyrics")
    artist: ArtistSummary | None = None


class TrackSummary(TrackReference, DeezerModel):
    """Subset of Track listed by albums, playlists, radios, charts and searches."""

    id: int
    readable: bool = True
    title: str
    title_short: str = ""
    title_version: str | None = None
    link: str = ""
    duration_in_seconds: int = Field(default=0, alias="duration")
    rank: int = 0
    has_explicit_lyrics: bool = Field(default=False, alias="explicit_lyrics")
    preview_url: str | None = Field(default=None, alias="preview")
    md5_image: str = ""
    artist: ArtistSummary | None = None
    album: AlbumSummary | None = None


class UserSummary(UserReference, DeezerModel):
    """Subset of User: playlist creators, comment authors, fans and followers."""

    id: int
    name: str
    link: str = ""
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    country: str = ""
    tracklist: str = ""


class PlaylistSummary(PlaylistReference, DeezerModel):
    """Subset of Playlist listed by users, artists, charts and searches."""

    id: int
    title: str
    is_public: bool = Field(default=True, alias="public")
    nb_tracks: int | None = None
    link: str = ""
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    checksum: str = ""
    tracklist: str = ""
    creation_date: str = ""
    time_add: int | None = None
    time_mod: int | None = None
    # search results name the owner "user", user listings name it "creator"
    user: UserSummary | None = None
    creator: UserSummary | None = None

    @property
    def owner(self) -> UserSummary | None:
        return self.user or self.creator


class RadioSummary(RadioReference, DeezerModel):
    """Subset of Radio listed by genres and searches."""

    id: int
    title: str
    description: str | None = None
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    tracklist: str = ""


class CommentParent(DeezerModel):
    """The object a comment was posted on."""

    id: int | str
    object_type: str = Field(alias="type")


class CommentSummary(CommentReference, DeezerModel):
    """A comment as listed under an album, artist or playlist."""

    id: int
    text: str
    date: int = 0
    author: UserSummary | None = None


class AlbumTrack(TrackSummary):
    """Track as listed inside an Album response."""


class PlaylistTrack(TrackSummary):
    """Track as listed inside a Playlist response."""

    unseen: bool = False
    added_on: int | None = Field(default=None, alias="time_add")


# ============================================================================
# Full models
# ============================================================================


class Artist(DeezerConnectable):
    """Contains all the information provided for an Artist."""

    api_path = "artist/{id}"

    id: int
    name: str
    link: str = ""
    share_link: str = Field(default="", alias="share")
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    nb_album: int = 0
    nb_fan: int = 0
    has_radio: bool = Field(default=False, alias="radio")
    tracklist: str = ""


class Album(DeezerConnectable):
    """Contains all the information provided for an Album."""

    api_path = "album/{id}"

    id: int
    title: str
    upc: str = ""
    link: str = ""
    share_link: str = Field(default="", alias="share")
    cover: str = ""
    cover_small: str = ""
    cover_medium: str = ""
    cover_big: str = ""
    cover_xl: str = ""
    md5_image: str = ""
    genre_id: int | None = None
    genres: DeezerList[GenreSummary] = Field(default_factory=list)
    label: str = ""
    nb_tracks: int = 0
    duration_in_seconds: int = Field(default=0, alias="duration")
    fans: int = 0
    rating: int | None = None
    release_date: str = ""
    record_type: str = ""
    available: bool = True
    alternative_album: "Album | None" = Field(default=None, alias="alternative")
    tracklist: str = ""
    has_explicit_lyrics: bool = Field(default=False, alias="explicit_lyrics")
    contributors: list[ContributorArtist] = Field(default_factory=list)
    artist: ArtistSummary | None = None
    tracks: DeezerList[AlbumTrack] = Field(default_factory=list)


class Track(DeezerObject):
    """Contains all the information provided for a Track."""

    api_path = "track/{id}"

    id: int
    readable: bool = True
    title: str
    title_short: str = ""
    title_version: str | None = None
    unseen: bool | None = None
    isrc: str = ""
    link: str = ""
    share_link: str = Field(default="", alias="share")
    duration_in_seconds: int = Field(default=0, alias="duration")
    track_position: int | None = None
    disk_number: int | None = None
    rank: int = 0
    release_date: str = ""
    has_explicit_lyrics: bool = Field(default=False, alias="explicit_lyrics")
    preview_url: str | None = Field(default=None, alias="preview")
    bpm: float | None = None
    gain: float | None = None
    available_countries: list[str] = Field(default_factory=list)
    alternative_track: "Track | None" = Field(default=None, alias="alternative")
    contributors: list[ContributorArtist] = Field(default_factory=list)
    md5_image: str = ""
    artist: ArtistSummary | None = None
    album: AlbumSummary | None = None


class User(DeezerConnectable):
    """Contains all the information provided for a User.

    Private fields (email, birthday, ...) are only sent for the authenticated
    user and stay at their defaults otherwise.
    """

    api_path = "user/{id}"

    id: int
    name: str
    last_name: str = Field(default="", alias="lastname")
    first_name: str = Field(default="", alias="firstname")
    email: str = ""
    status: int | None = None
    birthday: str = ""
    inscription_date: str = ""
    gender: str = ""
    link: str = ""
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    country: str = ""
    lang: str = ""
    is_kid: bool = False
    tracklist: str = ""


class Playlist(DeezerConnectable):
    """Contains all the information provided for a Playlist."""

    api_path = "playlist/{id}"

    id: int
    title: str
    description: str = ""
    duration_in_seconds: int = Field(default=0, alias="duration")
    is_public: bool = Field(default=True, alias="public")
    is_loved_track: bool = False
    is_collaborative: bool = Field(default=False, alias="collaborative")
    rating: int | None = None
    nb_tracks: int = 0
    unseen_track_count: int | None = None
    fans: int = 0
    link: str = ""
    share_link: str = Field(default="", alias="share")
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    checksum: str = ""
    creation_date: str = ""
    creator: UserSummary | None = None
    tracks: DeezerList[PlaylistTrack] = Field(default_factory=list)


class Comment(DeezerObject):
    """Contains all the information provided for a Comment."""

    api_path = "comment/{id}"

    id: int
    text: str
    date: int = 0
    parent: CommentParent | None = Field(default=None, alias="object")
    author: UserSummary | None = None


class Genre(DeezerEnumerable, DeezerConnectable):
    """Contains all the information provided for a Genre."""

    api_path = "genre/{id}"
    api_list_path = "genre"

    id: int
    name: str
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""


class Radio(DeezerEnumerable, DeezerConnectable):
    """Contains all the information provided for a Radio."""

    api_path = "radio/{id}"
    api_list_path = "radio"

    id: int
    title: str
    description: str | None = None
    share_link: str | None = Field(default=None, alias="share")
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""
    tracklist: str = ""


class Editorial(DeezerEnumerable):
    """Contains all the information provided for an Editorial."""

    api_path = "editorial/{id}"
    api_list_path = "editorial"

    id: int
    name: str
    picture: str = ""
    picture_small: str = ""
    picture_medium: str = ""
    picture_big: str = ""
    picture_xl: str = ""


# ============================================================================
# Connections
# ============================================================================


@connection(Album, "comments")
@connection(Artist, "comments")
@connection(Playlist, "comments")
class CommentConnection(CommentSummary):
    """Comment listed under an album, artist or playlist."""


@connection(Album, "fans")
@connection(Artist, "fans")
@connection(Playlist, "fans")
class FanConnection(UserSummary):
    """User who is a fan of an album, artist or playlist."""


@connection(User, "followings")
class UserFollowing(UserSummary):
    """User followed by another user."""


@connection(User, "followers")
class UserFollower(UserSummary):
    """User following another user."""


@connection(Album, "tracks")
class AlbumTrackConnection(TrackSummary):
    """Track as listed by ``album/{id}/tracks``."""

    isrc: str = ""
    track_position: int | None = None
    disk_number: int | None = None
    alternative_track: TrackSummary | None = Field(default=None, alias="alternative")


@connection(Artist, "albums")
class ArtistAlbum(AlbumSummary, DeezerObject):
    """Album listed by ``artist/{id}/albums``; also fetchable as a paginated sub-resource."""

    api_path = "artist/{id}/albums"


@connection(Artist, "top")
@connection(Radio, "tracks")
class TopTrackConnection(TrackSummary):
    """Track of an artist's top list or of a radio's track list."""

    contributors: list[ContributorArtist] = Field(default_factory=list)


@connection(Artist, "related")
@connection(Genre, "artists")
class ArtistConnection(ArtistSummary):
    """Artist listed by ``artist/{id}/related`` or ``genre/{id}/artists``."""


@connection(Artist, "playlists")
@connection(User, "playlists")
class PlaylistConnection(PlaylistSummary):
    """Playlist listed by ``artist/{id}/playlists`` or ``user/{id}/playlists``."""

    duration_in_seconds: int | None = Field(default=None, alias="duration")
    is_loved_track: bool = False
    is_collaborative: bool = Field(default=False, alias="collaborative")
    fans: int | None = None


@connection(Playlist, "tracks")
class PlaylistTrackConnection(PlaylistTrack):
    """Track listed by ``playlist/{id}/tracks``."""


@connection(Genre, "radios")
class RadioConnection(RadioSummary):
    """Radio listed by ``genre/{id}/radios``."""


# ============================================================================
# Search results
# ============================================================================


class SearchedAlbum(AlbumSummary):
    search_resource: ClassVar[SearchResource] = SearchResource.ALBUMS


class SearchedArtist(ArtistSummary):
    search_resource: ClassVar[SearchResource] = SearchResource.ARTISTS


class SearchedTrack(TrackSummary):
    search_resource: ClassVar[SearchResource] = SearchResource.TRACKS


class SearchedPlaylist(PlaylistSummary):
    search_resource: ClassVar[SearchResource] = SearchResource.PLAYLISTS


class SearchedUser(UserSummary):
    search_resource: ClassVar[SearchResource] = SearchResource.USERS


class SearchedRadio(RadioSummary):
    search_resource: ClassVar[SearchResource] = SearchResource.RADIO


# ============================================================================
# Singleton resources
# ============================================================================


class ChartTrack(TrackSummary):
    position: int = 0


class ChartAlbum(AlbumSummary):
    position: int = 0


class ChartArtist(ArtistSummary):
    position: int = 0


class ChartPlaylist(PlaylistSummary):
    position: int = 0


class Chart(DeezerModel):
    """Top tracks, albums, artists and playlists of ``chart`` (or ``chart/{genre_id}``)."""

    tracks: DeezerList[ChartTrack] = Field(default_factory=list)
    albums: DeezerList[ChartAlbum] = Field(default_factory=list)
    artists: DeezerList[ChartArtist] = Field(default_factory=list)
    playlists: DeezerList[ChartPlaylist] = Field(default_factory=list)


class Offer(DeezerModel):
    """A subscription offer available in the current country."""

    id: int
    name: str
    amount: str = ""
    currency: str = ""
    displayed_amount: str = ""
    tc: str = ""
    tc_html: str = ""
    tc_txt: str = ""
    try_and_buy: int = 0


class Infos(DeezerModel):
    """Information about the API in the caller's country (``infos``)."""

    country_iso: str
    country: str
    open: bool
    pop: str = ""
    upload_token: str = ""
    upload_token_lifetime: int | None = None
    offers: list[Offer] = Field(default_factory=list)


class Options(DeezerModel):
    """The current user's options (``options``)."""

    streaming: bool = False
    streaming_duration: int = 0
    offline: bool = False
    hq: bool = False
    ads_display: bool = False
    ads_audio: bool = False
    has_too_many_devices: bool = Field(default=False, alias="too_many_devices")
    can_subscribe: bool = False
    radio_skips: int = 0
    lossless: bool = False
    preview: bool = False
    radio: bool = False
