"""Records for regions, Pokédexes, game versions and version groups."""

from dataclasses import dataclass
from typing import ClassVar

from pokemonle.entity import Entity, Relation, RelationKind
from pokemonle.models_moves import Move, MoveName, MoveTarget, PokemonMove, PokemonMoveMethod
from pokemonle.models_pokemon import (
    Pokemon,
    PokemonAbility,
    PokemonStat,
    PokemonType,
    Stat,
    Type,
    TypeName,
)
from pokemonle.models_species import (
    PokemonColor,
    PokemonColorName,
    PokemonEggGroup,
    PokemonEvolution,
    PokemonHabitat,
    PokemonShape,
    PokemonSpecies,
    PokemonSpeciesFlavorText,
    PokemonSpeciesName,
)


def _belongs_to(target: str, column: str, name: str | None = None) -> Relation:
    return Relation(name or target, RelationKind.BELONGS_TO, target, column, "id")


def _has_many(target: str, column: str, name: str | None = None) -> Relation:
    return Relation(name or target, RelationKind.HAS_MANY, target, "id", column)


def _via(target: str, through: str) -> Relation:
    return Relation(target, RelationKind.MANY_TO_MANY, target, via=through)


@dataclass(frozen=True)
class Pokedex(Entity):
    table_name: ClassVar[str] = "pokedexes"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("pokedex_version_groups", "pokedex_id"),
        _belongs_to("regions", "region_id"),
        _via("version_groups", "pokedex_version_groups"),
    )

    id: int
    region_id: int | None
    identifier: str
    is_main_series: bool


@dataclass(frozen=True)
class PokedexVersionGroup(Entity):
    table_name: ClassVar[str] = "pokedex_version_groups"
    primary_key: ClassVar[tuple[str, ...]] = ("pokedex_id", "version_group_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("pokedexes", "pokedex_id"),
        _belongs_to("version_groups", "version_group_id"),
    )

    pokedex_id: int
    version_group_id: int


@dataclass(frozen=True)
class Region(Entity):
    table_name: ClassVar[str] = "regions"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("locations", "region_id"),
        _has_many("pokedexes", "region_id"),
        _has_many("region_names", "region_id"),
        _via("languages", "region_names"),
    )

    id: int
    identifier: str


@dataclass(frozen=True)
class RegionName(Entity):
    table_name: ClassVar[str] = "region_names"
    primary_key: ClassVar[tuple[str, ...]] = ("region_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("regions", "region_id"),
    )

    region_id: int
    local_language_id: int
    name: str


@dataclass(frozen=True)
class VersionGroup(Entity):
    table_name: ClassVar[str] = "version_groups"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("ability_flavor_text", "version_group_id"),
        _belongs_to("generations", "generation_id"),
        _has_many("item_flavor_text", "version_group_id"),
        _has_many("move_flavor_text", "version_group_id"),
        _has_many("pokedex_version_groups", "version_group_id"),
        _has_many("pokemon_moves", "version_group_id"),
        _has_many("version_group_names", "version_group_id"),
        _has_many("versions", "version_group_id"),
        _via("languages", "version_group_names"),
        _via("pokedexes", "pokedex_version_groups"),
    )

    id: int
    identifier: str
    generation_id: int
    order: int


@dataclass(frozen=True)
class VersionGroupName(Entity):
    table_name: ClassVar[str] = "version_group_names"
    primary_key: ClassVar[tuple[str, ...]] = ("version_group_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("version_groups", "version_group_id"),
    )

    version_group_id: int
    local_language_id: int
    name: str


@dataclass(frozen=True)
class Version(Entity):
    table_name: ClassVar[str] = "versions"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("encounters", "version_id"),
        _has_many("location_area_encounter_rates", "version_id"),
        _has_many("pokemon_species_flavor_text", "version_id"),
        _belongs_to("version_groups", "version_group_id"),
        _has_many("version_names", "version_id"),
        _via("languages", "version_names"),
    )

    id: int
    version_group_id: int
    identifier: str


@dataclass(frozen=True)
class VersionName(Entity):
    table_name: ClassVar[str] = "version_names"
    primary_key: ClassVar[tuple[str, ...]] = ("version_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("versions", "version_id"),
    )

    version_id: int
    local_language_id: int
    name: str


_ENTITIES: dict[str, type[Entity]] = {
    entity.table_name: entity
    for entity in (
        Move,
        MoveName,
        MoveTarget,
        PokemonMoveMethod,
        PokemonMove,
        Pokemon,
        PokemonAbility,
        PokemonStat,
        PokemonType,
        Stat,
        Type,
        TypeName,
        PokemonSpecies,
        PokemonSpeciesName,
        PokemonSpeciesFlavorText,
        PokemonColor,
        PokemonColorName,
        PokemonEggGroup,
        PokemonEvolution,
        PokemonHabitat,
        PokemonShape,
        Pokedex,
        PokedexVersionGroup,
        Region,
        RegionName,
        VersionGroup,
        VersionGroupName,
        Version,
        VersionName,
    )
}


def entity_for_table(table_name: str) -> type[Entity]:
    """Return the record class stored in the named table."""
    try:
        return _ENTITIES[table_name]
    except KeyError:
        raise KeyError(f"no entity for table {table_name!r}") from None