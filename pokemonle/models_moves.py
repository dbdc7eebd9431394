"""Records for moves, their names, targets and how Pokémon learn them."""

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
class Move(Entity):
    table_name: ClassVar[str] = "moves"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("contest_effects", "contest_effect_id"),
        _belongs_to("contest_types", "contest_type_id"),
        _belongs_to("generations", "generation_id"),
        _belongs_to("move_damage_classes", "damage_class_id"),
        _belongs_to("move_effects", "effect_id"),
        _has_many("move_flavor_text", "move_id"),
        _has_many("move_names", "move_id"),
        _belongs_to("move_targets", "target_id"),
        _has_many("pokemon_moves", "move_id"),
        _belongs_to("types", "type_id"),
        _via("languages", "move_names"),
    )

    id: int
    identifier: str
    generation_id: int
    type_id: int | None
    power: int | None
    pp: int | None
    accuracy: int | None
    priority: int
    target_id: int
    damage_class_id: int
    effect_id: int | None
    effect_chance: int | None
    contest_type_id: int | None
    contest_effect_id: int | None


@dataclass(frozen=True)
class MoveName(Entity):
    table_name: ClassVar[str] = "move_names"
    primary_key: ClassVar[tuple[str, ...]] = ("move_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("moves", "move_id"),
    )

    move_id: int
    local_language_id: int
    name: str


@dataclass(frozen=True)
class MoveTarget(Entity):
    table_name: ClassVar[str] = "move_targets"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (_has_many("moves", "target_id"),)

    id: int
    identifier: str


@dataclass(frozen=True)
class PokemonMoveMethod(Entity):
    table_name: ClassVar[str] = "pokemon_move_methods"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("pokemon_moves", "pokemon_move_method_id"),
    )

    id: int
    identifier: str


@dataclass(frozen=True)
class PokemonMove(Entity):
    table_name: ClassVar[str] = "pokemon_moves"
    primary_key: ClassVar[tuple[str, ...]] = (
        "pokemon_id",
        "version_group_id",
        "move_id",
        "pokemon_move_method_id",
        "level",
    )
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("moves", "move_id"),
        _belongs_to("pokemon", "pokemon_id"),
        _belongs_to("pokemon_move_methods", "pokemon_move_method_id"),
        _belongs_to("version_groups", "version_group_id"),
    )

    pokemon_id: int
    version_group_id: int
    move_id: int
    pokemon_move_method_id: int
    level: int
    order: int | None
    mastery: int | None