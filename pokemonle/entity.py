"""Base class for database records and the relations between tables."""

import dataclasses
import enum
import functools
import re
import typing
from collections.abc import Mapping
from typing import Any, ClassVar


class RelationKind(enum.Enum):
    BELONGS_TO = "belongs_to"
    HAS_MANY = "has_many"
    MANY_TO_MANY = "many_to_many"


@dataclasses.dataclass(frozen=True)
class Relation:
    """A link from one table to another.

    ``from_column`` is on this table and ``to_column`` on ``target``. A
    many-to-many relation goes through the ``via`` table instead.
    """

    name: str
    kind: RelationKind
    target: str
    from_column: str | None = None
    to_column: str | None = None
    via: str | None = None


def _is_bool_hint(hint: Any) -> bool:
    if hint is bool:
        return True
    if isinstance(hint, str):
        parts = re.split(r"[|\[\],]", hint.replace(" ", ""))
        return "bool" in parts
    return bool in typing.get_args(hint)


@functools.lru_cache(maxsize=None)
def _bool_columns(cls: type) -> frozenset[str]:
    return frozenset(
        field.name for field in dataclasses.fields(cls) if _is_bool_hint(field.type)
    )


@dataclasses.dataclass(frozen=True)
class Entity:
    """A row of one table; subclasses declare the columns as dataclass fields."""

    table_name: ClassVar[str] = ""
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = ()
    tag_names: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def struct_name(cls) -> str:
        return cls.__name__

    @classmethod
    def tags(cls) -> tuple[str, ...]:
        return tuple(cls.tag_names)

    @classmethod
    def columns(cls) -> tuple[str, ...]:
        return tuple(field.name for field in dataclasses.fields(cls))

    @classmethod
    def from_row(cls, row: Any) -> "Entity":
        """Build a record from a mapping or an ``sqlite3.Row``."""
        values = row if isinstance(row, Mapping) else dict(row)
        bools = _bool_columns(cls)
        kwargs = {}
        for name in cls.columns():
            try:
                value = values[name]
            except KeyError:
                raise KeyError(f"{cls.table_name or cls.__name__}: missing column {name!r}") from None
            if value is not None and name in bools:
                value = bool(value)
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.columns()}

    def primary_key_values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.primary_key)