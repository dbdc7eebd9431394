"""Records for Pokémon, their abilities, stats and types."""

from dataclasses import dataclass
from typing import ClassVar

from pokemonle.entity import Entity, Relation, RelationKind


def _belongs_to(target: str, column: str, name: str | None = None) -> Relation:
    return Relation(name or target, RelationKind.BELONGS_TO, target, column, "id")


def _has_many(target: str, column: str, name: str | None = None) -> Relation:
    return Relation(name or target, RelationKind.HAS_MANY, target, "id", column)


def _via(target: str, through: str) -> Relation:
    return Relation(target, RelationKind.MANY_TO_MANY, target, via=through)


@dataclass(frozen=True)
class Pokemon(Entity):
    table_name: ClassVar[str] = "pokemon"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("encounters", "pokemon_id"),
        _has_many("pokemon_abilities", "pokemon_id"),
        _has_many("pokemon_moves", "pokemon_id"),
        _belongs_to("pokemon_species", "species_id"),
        _has_many("pokemon_stats", "pokemon_id"),
        _has_many("pokemon_types", "pokemon_id"),
        _via("stats", "pokemon_stats"),
        _via("types", "pokemon_types"),
    )

    id: int
    identifier: str
    species_id: int
    height: int
    weight: int
    base_experience: int
    order: int | None
    is_default: bool


@dataclass(frozen=True)
class PokemonAbility(Entity):
    table_name: ClassVar[str] = "pokemon_abilities"
    primary_key: ClassVar[tuple[str, ...]] = ("pokemon_id", "ability_id", "slot")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("abilities", "ability_id"),
        _belongs_to("pokemon", "pokemon_id"),
    )

    pokemon_id: int
    ability_id: int
    is_hidden: bool
    slot: int


@dataclass(frozen=True)
class PokemonStat(Entity):
    table_name: ClassVar[str] = "pokemon_stats"
    primary_key: ClassVar[tuple[str, ...]] = ("pokemon_id", "stat_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("pokemon", "pokemon_id"),
        _belongs_to("stats", "stat_id"),
    )

    pokemon_id: int
    stat_id: int
    base_stat: int
    effort: int


@dataclass(frozen=True)
class PokemonType(Entity):
    table_name: ClassVar[str] = "pokemon_types"
    primary_key: ClassVar[tuple[str, ...]] = ("pokemon_id", "type_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("pokemon", "pokemon_id"),
        _belongs_to("types", "type_id"),
    )

    pokemon_id: int
    type_id: int
    slot: int


@dataclass(frozen=True)
class Stat(Entity):
    table_name: ClassVar[str] = "stats"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("pokemon_stats", "stat_id"),
        _via("pokemon", "pokemon_stats"),
    )

    id: int
    damage_class_id: int | None
    identifier: str
    is_battle_only: bool
    game_index: int | None


@dataclass(frozen=True)
class Type(Entity):
    table_name: ClassVar[str] = "types"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("generations", "generation_id"),
        _belongs_to("move_damage_classes", "damage_class_id"),
        _has_many("moves", "type_id"),
        _has_many("pokemon_evolution", "party_type_id"),
        _has_many("pokemon_types", "type_id"),
        _has_many("type_names", "type_id"),
        _via("languages", "type_names"),
        _via("pokemon", "pokemon_types"),
    )

    id: int
    identifier: str
    generation_id: int
    damage_class_id: int | None


@dataclass(frozen=True)
class TypeName(Entity):
    table_name: ClassVar[str] = "type_names"
    primary_key: ClassVar[tuple[str, ...]] = ("type_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("types", "type_id"),
    )

    type_id: int
    local_language_id: int
    name: str