"""
Deezer Resources - How each resource kind is addressed on the API, and the
decoder for the ``{"data": [...]}`` envelope used by collection endpoints.

Models describe their own URLs through class-level path templates, so the
dispatcher in core.py is written once for every resource kind:

- DeezerObject: ``get_api_url(identifier)`` for by-id lookups
- DeezerEnumerable: ``get_all_api_url()`` for "list everything" endpoints
- DeezerConnectable: ``get_connection_url(child, identifier)`` for the
  relationship collections registered with ``@connection(owner, "name")``
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, BeforeValidator, ConfigDict

from utils.pydantic_tools import BaseModelWithMethods

T = TypeVar("T")

# Prefixes the API accepts in place of a numeric id
ALTERNATE_KEY_PREFIXES = frozenset({"upc", "isrc"})


# ============================================================================
# Identifiers
# ============================================================================


@dataclass(frozen=True)
class NumericId:
    """A numeric Deezer id. Serializes as the bare decimal number."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Deezer ids are integers, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Deezer ids are not negative, got {self.value}")

    def serialize(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True)
class AlternateKey:
    """A non-numeric lookup key such as an album UPC, serialized as ``prefix:value``."""

    prefix: str
    value: str

    def __post_init__(self) -> None:
        if self.prefix not in ALTERNATE_KEY_PREFIXES:
            raise ValueError(
                f"Unknown alternate key prefix {self.prefix!r}, "
                f"expected one of {sorted(ALTERNATE_KEY_PREFIXES)}"
            )
        if not str(self.value).strip():
            raise ValueError(f"Empty {self.prefix} value")

    def serialize(self) -> str:
        return f"{self.prefix}:{str(self.value).strip()}"

    def __str__(self) -> str:
        return self.serialize()


Identifier = NumericId | AlternateKey


def as_identifier(value: Identifier | int) -> Identifier:
    """Coerce a plain int into a NumericId; identifiers pass through."""
    if isinstance(value, NumericId | AlternateKey):
        return value
    return NumericId(value)


def upc(value: str) -> AlternateKey:
    return AlternateKey("upc", value)


def isrc(value: str) -> AlternateKey:
    return AlternateKey("isrc", value)


# ============================================================================
# Capability protocols
# ============================================================================


@runtime_checkable
class Identifiable(Protocol):
    """A resource kind fetchable by identifier."""

    @classmethod
    def get_api_url(cls, identifier: Identifier | int) -> str: ...


@runtime_checkable
class Enumerable(Identifiable, Protocol):
    """A resource kind with a "list all" endpoint."""

    @classmethod
    def get_all_api_url(cls) -> str: ...


@runtime_checkable
class Connectable(Protocol):
    """A resource kind with relationship collections hanging off its instances."""

    @classmethod
    def get_connection_url(cls, child: type, identifier: str) -> str: ...


# ============================================================================
# Model mixins implementing the protocols
# ============================================================================


class DeezerModel(BaseModelWithMethods):
    """Any immutable record decoded from one JSON object of the API."""


class DeezerObject(DeezerModel):
    """A model addressable by identifier through its ``api_path`` template."""

    api_path: ClassVar[str]

    @classmethod
    def format_api_path(cls, identifier: str) -> str:
        return cls.api_path.format(id=identifier)

    @classmethod
    def get_api_url(cls, identifier: Identifier | int) -> str:
        return cls.format_api_path(as_identifier(identifier).serialize())


class DeezerEnumerable(DeezerObject):
    """A DeezerObject whose kind can also be listed as a whole."""

    api_list_path: ClassVar[str]

    @classmethod
    def get_all_api_url(cls) -> str:
        return cls.api_list_path


# (owner model, child model) -> relationship path segment
_CONNECTIONS: dict[tuple[type, type], str] = {}


class DeezerConnectable(DeezerObject):
    """A DeezerObject with relationship collections registered through ``connection``."""

    @classmethod
    def get_connection_url(cls, child: type, identifier: str) -> str:
        for base in cls.__mro__:
            relationship = _CONNECTIONS.get((base, child))
            if relationship is not None:
                return f"{cls.format_api_path(identifier)}/{relationship}"
        raise TypeError(f"{cls.__name__} has no connection returning {child.__name__}")

    @classmethod
    def connections(cls) -> dict[str, type]:
        """Relationship name -> child model for this owner."""
        found: dict[str, type] = {}
        for base in reversed(cls.__mro__):
            found.update(
                {name: child for (owner, child), name in _CONNECTIONS.items() if owner is base}
            )
        return found


def connection(owner: type[DeezerConnectable], relationship: str) -> Callable[[type[T]], type[T]]:
    """Class decorator registering ``child`` as the ``relationship`` collection of ``owner``.

    Example:
        @connection(Album, "comments")
        class AlbumCommentConnection(DeezerModel): ...
    """

    def register(child: type[T]) -> type[T]:
        existing = _CONNECTIONS.get((owner, child))
        if existing is not None and existing != relationship:
            raise ValueError(
                f"{child.__name__} is already the {existing!r} connection of {owner.__name__}"
            )
        _CONNECTIONS[(owner, child)] = relationship
        return child

    return register


# ============================================================================
# Envelope
# ============================================================================


def _unwrap_data(value: Any) -> Any:
    if isinstance(value, dict) and "data" in value:
        return value["data"]
    return value


# A nested collection field; accepts either the envelope or a bare array and
# always decodes to a plain list.
DeezerList = Annotated[list[T], BeforeValidator(_unwrap_data)]


class DeezerArray(BaseModel, Generic[T]):
    """
    The ``{"data": [...]}`` envelope of collection endpoints.

    Read access forwards to ``data``; server order is kept as returned.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    data: list[T]
    total: int | None = None
    next: str | None = None
    prev: str | None = None

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    def __len__(self) -> int:
        return len(self.data)

    def to_list(self) -> list[T]:
        return list(self.data)


def unwrap_envelope(payload: Any, model: type[T]) -> list[T]:
    """Decode a collection payload into a list of ``model``.

    A bare JSON array is accepted as well, so callers get the same list type
    whether or not the server wrapped it.

    Raises:
        pydantic.ValidationError: payload has no ``data`` array or an item does not decode
    """
    if isinstance(payload, list):
        payload = {"data": payload}
    return DeezerArray[model].model_validate(payload).to_list()  # type: ignore[valid-type]
