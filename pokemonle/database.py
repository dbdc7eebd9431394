"""SQLite-backed queries over the Pokémon data tables."""

import contextlib
import sqlite3
from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from pokemonle.entity import Entity
from pokemonle.errors import DatabaseError, ResourceNotFoundError, UnsupportedDatabaseError
from pokemonle.models_moves import Move, MoveName
from pokemonle.models_pokemon import Pokemon
from pokemonle.models_species import (
    PokemonSpecies,
    PokemonSpeciesFlavorText,
    PokemonSpeciesName,
)
from pokemonle.models_world import Region, RegionName, Version, VersionGroup, VersionName
from pokemonle.types import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    PaginatedResource,
    WithName,
)

E = TypeVar("E", bound=Entity)

_LANGUAGE_COLUMN = "local_language_id"
_NAME_COLUMN = "name"

# Record class -> (class holding its localized names, column in that table pointing back).
_LOCALIZED: dict[type[Entity], tuple[type[Entity], str]] = {
    PokemonSpecies: (PokemonSpeciesName, "pokemon_species_id"),
    Move: (MoveName, "move_id"),
    Region: (RegionName, "region_id"),
    Version: (VersionName, "version_id"),
}


@contextlib.contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise DatabaseError(exc) from exc


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _select_list(entity: type[Entity], alias: str) -> str:
    return ", ".join(f"{alias}.{_quote(column)}" for column in entity.columns())


def _build(entity: type[E], values: Sequence[Any]) -> E:
    return entity.from_row(dict(zip(entity.columns(), values)))  # type: ignore[return-value]


def _check_limit(limit: int) -> None:
    if limit < 1:
        raise ValueError(f"page size must be at least 1, got {limit}")


def _check_page(page: int, *, first: int) -> None:
    if page < first:
        raise ValueError(f"page must be at least {first}, got {page}")


def connect(url: str) -> "DatabaseClient":
    """Open a client on an ``sqlite:`` database URL."""
    scheme, sep, rest = url.partition(":")
    if not sep or scheme.lower() != "sqlite":
        raise UnsupportedDatabaseError(url)
    if rest.startswith("//"):
        rest = rest[2:]
    path, _, query = rest.partition("?")
    if not path:
        raise UnsupportedDatabaseError(url)
    with _database_errors():
        if query:
            conn = sqlite3.connect(f"file:{path}?{query}", uri=True)
        else:
            conn = sqlite3.connect(path)
    return DatabaseClient(conn)


class DatabaseClient:
    """Runs the library's queries against one open SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def __enter__(self) -> "DatabaseClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.conn.close()

    def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[tuple]:
        with _database_errors():
            return self.conn.execute(sql, tuple(params)).fetchall()

    def _fetch_one(self, sql: str, params: Sequence[Any] = ()) -> tuple | None:
        with _database_errors():
            return self.conn.execute(sql, tuple(params)).fetchone()

    def _paginate(
        self, sql: str, params: Sequence[Any], index: int, limit: int
    ) -> tuple[list[tuple], int, int]:
        """Fetch the zero-based page ``index``; return rows, item count and page count."""
        rows = self._fetch_all(f"{sql} LIMIT ? OFFSET ?", (*params, limit, index * limit))
        count_row = self._fetch_one(f"SELECT COUNT(*) FROM ({sql})", params)
        total_items = count_row[0] if count_row else 0
        total_pages = -(-total_items // limit)
        return rows, total_items, total_pages

    @staticmethod
    def _with_name(entity: type[E], name_entity: type[Entity], row: Sequence[Any]) -> WithName[E]:
        width = len(entity.columns())
        item = _build(entity, row[:width])
        names = dict(zip(name_entity.columns(), row[width:]))
        name = names.get(_NAME_COLUMN)
        if name is None:
            name = getattr(item, "identifier")
        return WithName(item=item, name=name)

    @staticmethod
    def _localization(entity: type[Entity]) -> tuple[type[Entity], str]:
        try:
            return _LOCALIZED[entity]
        except KeyError:
            raise TypeError(f"{entity.__name__} has no localized names") from None

    @staticmethod
    def _single_key(entity: type[Entity]) -> str:
        if len(entity.primary_key) != 1:
            raise TypeError(f"{entity.__name__} does not have a single-column primary key")
        return entity.primary_key[0]

    def list_with_pagination(self, entity: type[E], page: int, limit: int) -> PaginatedResource[E]:
        """List records of a table; ``page`` counts from zero."""
        _check_limit(limit)
        _check_page(page, first=0)
        order = ", ".join(f"t.{_quote(c)}" for c in entity.primary_key)
        sql = (
            f"SELECT {_select_list(entity, 't')} FROM {_quote(entity.table_name)} AS t "
            f"ORDER BY {order}"
        )
        rows, total_items, total_pages = self._paginate(sql, (), page, limit)
        return PaginatedResource(
            data=[_build(entity, row) for row in rows],
            page=page,
            per_page=limit,
            total_pages=total_pages,
            total_items=total_items,
        )

    def get_by_id(self, entity: type[E], resource_id: int) -> E:
        key = self._single_key(entity)
        row = self._fetch_one(
            f"SELECT {_select_list(entity, 't')} FROM {_quote(entity.table_name)} AS t "
            f"WHERE t.{_quote(key)} = ?",
            (resource_id,),
        )
        if row is None:
            raise ResourceNotFoundError(f"resource {resource_id} not found")
        return _build(entity, row)

    def _localized_select(self, entity: type[Entity]) -> str:
        name_entity, foreign_key = self._localization(entity)
        key = self._single_key(entity)
        return (
            f"SELECT {_select_list(entity, 't')}, {_select_list(name_entity, 'n')} "
            f"FROM {_quote(entity.table_name)} AS t "
            f"LEFT JOIN {_quote(name_entity.table_name)} AS n "
            f"ON n.{_quote(foreign_key)} = t.{_quote(key)} "
            f"WHERE n.{_quote(_LANGUAGE_COLUMN)} = ?"
        )

    def list_localized(
        self,
        entity: type[E],
        page: int,
        limit: int,
        lang: int,
        query: str | None = None,
    ) -> PaginatedResource[WithName[E]]:
        """List records with names in ``lang`` containing ``query``; ``page`` counts from one."""
        _check_limit(limit)
        _check_page(page, first=1)
        name_entity, _ = self._localization(entity)
        key = self._single_key(entity)
        sql = (
            f"{self._localized_select(entity)} AND n.{_quote(_NAME_COLUMN)} LIKE ? "
            f"ORDER BY t.{_quote(key)}"
        )
        params = (lang, f"%{query or ''}%")
        rows, total_items, total_pages = self._paginate(sql, params, page - 1, limit)
        return PaginatedResource(
            data=[self._with_name(entity, name_entity, row) for row in rows],
            page=page,
            per_page=limit,
            total_pages=total_pages,
            total_items=total_items,
        )

    def get_localized(self, entity: type[E], resource_id: int, lang: int) -> WithName[E]:
        name_entity, _ = self._localization(entity)
        key = self._single_key(entity)
        row = self._fetch_one(
            f"{self._localized_select(entity)} AND t.{_quote(key)} = ?",
            (lang, resource_id),
        )
        if row is None:
            raise ResourceNotFoundError(f"resource {resource_id} not found")
        return self._with_name(entity, name_entity, row)

    def get_pokemon_species_by_evolution_chain_id(
        self, evolution_chain_id: int, lang: int
    ) -> PaginatedResource[WithName[PokemonSpecies]]:
        rows = self._fetch_all(
            f"{self._localized_select(PokemonSpecies)} AND t.\"evolution_chain_id\" = ? "
            'ORDER BY t."id"',
            (lang, evolution_chain_id),
        )
        data = [self._with_name(PokemonSpecies, PokemonSpeciesName, row) for row in rows]
        return PaginatedResource(
            data=data,
            page=DEFAULT_PAGE,
            per_page=DEFAULT_PER_PAGE,
            total_pages=1,
            total_items=len(data),
        )

    def get_pokemon_species_flavor_text(
        self, resource_id: int, version: int, lang: int
    ) -> PokemonSpeciesFlavorText:
        entity = PokemonSpeciesFlavorText
        row = self._fetch_one(
            f"SELECT {_select_list(entity, 't')} FROM {_quote(entity.table_name)} AS t "
            't."species_id" = ? AND t."version_id" = ? AND t."language_id" = ?'.join(
                ["WHERE ", ""]
            ),
            (resource_id, version, lang),
        )
        if row is None:
            raise ResourceNotFoundError(
                f"Pokemon species flavor text not found for id: {resource_id} and lang: {lang}"
            )
        return _build(entity, row)

    def _latest_version_group_for_move(self, move_id: int) -> int | None:
        row = self._fetch_one(
            'SELECT "version_group_id" FROM "pokemon_moves" WHERE "move_id" = ? '
            'ORDER BY "version_group_id" DESC LIMIT 1',
            (move_id,),
        )
        return None if row is None else row[0]

    def get_pokemons_by_move_id(
        self,
        move_id: int,
        version_group: int | None,
        page: int,
        limit: int,
        lang: int,
    ) -> PaginatedResource[WithName[Pokemon]]:
        """Pokémon that learn a move; without a version group the move's latest one is used."""
        _check_limit(limit)
        _check_page(page, first=1)
        if version_group is None:
            version_group = self._latest_version_group_for_move(move_id)
        conditions = ['pm."move_id" = ?', f"n.{_quote(_LANGUAGE_COLUMN)} = ?"]
        params: list[Any] = [move_id, lang]
        if version_group is not None:
            conditions.append('pm."version_group_id" = ?')
            params.append(version_group)
        sql = (
            f"SELECT {_select_list(Pokemon, 'p')}, {_select_list(PokemonSpeciesName, 'n')} "
            'FROM "pokemon" AS p '
            'JOIN "pokemon_moves" AS pm ON pm."pokemon_id" = p."id" '
            'JOIN "pokemon_species" AS s ON s."id" = p."species_id" '
            'JOIN "pokemon_species_names" AS n ON n."pokemon_species_id" = s."id" '
            f"WHERE {' AND '.join(conditions)} "
            'ORDER BY p."id", pm."version_group_id", pm."pokemon_move_method_id", pm."level"'
        )
        rows, total_items, total_pages = self._paginate(sql, params, page - 1, limit)
        return PaginatedResource(
            data=[self._with_name(Pokemon, PokemonSpeciesName, row) for row in rows],
            page=page,
            per_page=limit,
            total_pages=total_pages,
            total_items=total_items,
        )

    def _latest(self, entity: type[E], message: str) -> E:
        row = self._fetch_one(
            f"SELECT {_select_list(entity, 't')} FROM {_quote(entity.table_name)} AS t "
            'ORDER BY t."id" DESC LIMIT 1'
        )
        if row is None:
            raise ResourceNotFoundError(message)
        return _build(entity, row)

    def get_latest_version(self) -> Version:
        return self._latest(Version, "Latest version not found")

    def get_latest_version_group(self) -> VersionGroup:
        return self._latest(VersionGroup, "Latest version group not found")