"""Request and response value types shared by the database layer."""

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_LANGUAGE = 12
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 25
PER_PAGE_MIN = 10
PER_PAGE_MAX = 100


def _record_dict(value: Any) -> dict[str, Any]:
    """Return the fields of a record as a dict, for flattening."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return dict(to_dict())
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"cannot flatten value of type {type(value).__name__}")


def _serialise(value: Any) -> Any:
    try:
        return _record_dict(value)
    except TypeError:
        return value


def _parse_int(value: Any, field: str, *, unsigned: bool = False) -> int:
    if isinstance(value, bool):
        raise ValueError(f"invalid value for {field!r}: {value!r}")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            raise ValueError(f"invalid value for {field!r}: {value!r}") from None
    else:
        raise ValueError(f"invalid value for {field!r}: {value!r}")
    if unsigned and number < 0:
        raise ValueError(f"{field!r} must not be negative, got {number}")
    return number


@dataclasses.dataclass
class WithName(Generic[T]):
    """A record together with its localized name."""

    item: T
    name: str

    @classmethod
    def from_tuple(cls, pair: tuple[T, str]) -> "WithName[T]":
        item, name = pair
        return cls(item=item, name=name)

    def to_dict(self) -> dict[str, Any]:
        """The item's fields flattened, followed by the name."""
        return {**_record_dict(self.item), "name": self.name}


@dataclasses.dataclass
class WithSlot(Generic[T]):
    """A record together with the slot it occupies."""

    item: T
    slot: int
    is_hidden: bool

    def to_dict(self) -> dict[str, Any]:
        return {**_record_dict(self.item), "slot": self.slot, "is_hidden": self.is_hidden}


@dataclasses.dataclass
class PaginatedResource(Generic[T]):
    """One page of results with paging metadata."""

    data: list[T]
    page: int
    per_page: int
    total_pages: int
    total_items: int

    @classmethod
    def from_list(cls, data: Iterable[T]) -> "PaginatedResource[T]":
        """Wrap a complete result set as a single page."""
        items = list(data)
        return cls(
            data=items,
            page=1,
            per_page=len(items),
            total_pages=1,
            total_items=len(items),
        )

    def map(self, func: Callable[[T], U]) -> "PaginatedResource[U]":
        """Apply func to each item, keeping the paging metadata."""
        return self.map_data(lambda items: [func(item) for item in items])

    def map_data(self, func: Callable[[list[T]], Iterable[U]]) -> "PaginatedResource[U]":
        """Replace the whole item list by func(data), keeping the paging metadata."""
        return PaginatedResource(
            data=list(func(self.data)),
            page=self.page,
            per_page=self.per_page,
            total_pages=self.total_pages,
            total_items=self.total_items,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": [_serialise(item) for item in self.data],
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
        }


@dataclasses.dataclass(frozen=True)
class ResourceId:
    id: int


@dataclasses.dataclass(frozen=True)
class VersionGroupQuery:
    version_group: int | None = None


@dataclasses.dataclass(frozen=True)
class VersionQuery:
    version: int


@dataclasses.dataclass(frozen=True)
class LanguageQuery:
    lang: int = DEFAULT_LANGUAGE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LanguageQuery":
        """Read a query mapping; a missing language falls back to the default."""
        if "lang" not in data:
            return cls()
        return cls(lang=_parse_int(data["lang"], "lang"))


@dataclasses.dataclass(frozen=True)
class SearchQuery:
    q: str | None = None


@dataclasses.dataclass(frozen=True)
class PaginateQuery:
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PaginateQuery":
        """Read a query mapping; missing fields take their defaults."""
        page = _parse_int(data["page"], "page", unsigned=True) if "page" in data else DEFAULT_PAGE
        per_page = (
            _parse_int(data["per_page"], "per_page", unsigned=True)
            if "per_page" in data
            else DEFAULT_PER_PAGE
        )
        return cls(page=page, per_page=per_page)