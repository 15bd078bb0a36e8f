"""
Deezer Search Service - Keyword search against typed result sets.

    results = await client.albums().search("eminem").strict().order(SearchOrder.RATING_DESC).send()

A SearchClient is a one-shot builder: ``strict()`` and ``order()`` return new
builders, and ``send()`` consumes the builder it is called on.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from utils.get_logger import get_logger

if TYPE_CHECKING:
    from api.deezer.core import DeezerService

logger = get_logger(__name__)


class SearchOrder(str, Enum):
    """Sort strategies accepted by the ``order`` search parameter."""

    RANKING = "RANKING"
    TRACK_ASC = "TRACK_ASC"
    TRACK_DESC = "TRACK_DESC"
    ARTIST_ASC = "ARTIST_ASC"
    ARTIST_DESC = "ARTIST_DESC"
    ALBUM_ASC = "ALBUM_ASC"
    ALBUM_DESC = "ALBUM_DESC"
    RATING_ASC = "RATING_ASC"
    RATING_DESC = "RATING_DESC"
    DURATION_ASC = "DURATION_ASC"
    DURATION_DESC = "DURATION_DESC"

    def __str__(self) -> str:
        return self.value


class SearchResource(str, Enum):
    """Search categories; each maps to ``search/<value>``."""

    ALBUMS = "album"
    ARTISTS = "artist"
    HISTORY = "history"
    PLAYLISTS = "playlist"
    PODCASTS = "podcast"
    RADIO = "radio"
    TRACKS = "track"
    USERS = "user"

    @property
    def url(self) -> str:
        return f"search/{self.value}"

    @classmethod
    def default(cls) -> "SearchResource":
        return cls.TRACKS


@runtime_checkable
class Searchable(Protocol):
    """A model decoded from search results of its registered category."""

    search_resource: ClassVar[SearchResource]


SearchT = TypeVar("SearchT", bound=Searchable)


@dataclass(frozen=True)
class SearchQuery:
    """Parameters of one search request."""

    query: str
    strict: bool = False
    order: SearchOrder = SearchOrder.RANKING

    def to_params(self) -> dict[str, str]:
        params = {"q": self.query}
        if self.strict:
            params["strict"] = "on"
        params["order"] = self.order.value
        return params


@dataclass
class SearchClient(Generic[SearchT]):
    """Builder for a search against the category of ``model``."""

    client: "DeezerService"
    model: type[SearchT]
    query: SearchQuery
    _sent: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.query, str):
            self.query = SearchQuery(self.query)
        if not self.query.query.strip():
            raise ValueError("Search query must not be empty")
        if not isinstance(self.model, Searchable) or not isinstance(
            self.model.search_resource, SearchResource
        ):
            raise TypeError(f"{self.model.__name__} is not searchable")

    @property
    def resource(self) -> SearchResource:
        return self.model.search_resource

    def strict(self) -> "SearchClient[SearchT]":
        """Only return exact matches."""
        self._ensure_unsent()
        return replace(self, query=replace(self.query, strict=True))

    def order(self, order: SearchOrder) -> "SearchClient[SearchT]":
        self._ensure_unsent()
        return replace(self, query=replace(self.query, order=SearchOrder(order)))

    def to_params(self) -> dict[str, str]:
        """Query parameters ``send()`` will issue."""
        return self.query.to_params()

    async def send(self) -> list[SearchT]:
        """Run the search and consume this builder.

        Raises:
            RuntimeError: the builder was already sent
            DeezerError: transport, status or decode failure
        """
        self._ensure_unsent()
        self._sent = True
        params = self.to_params()
        logger.debug(f"Searching {self.resource.url} with {params}")
        return await self.client.fetch_array(self.model, self.resource.url, params)

    def _ensure_unsent(self) -> None:
        if self._sent:
            raise RuntimeError("SearchClient.send() was already called; build a new search")
