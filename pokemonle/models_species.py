"""Records for Pokémon species and their colours, shapes, habitats and evolutions."""

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
class PokemonSpecies(Entity):
    table_name: ClassVar[str] = "pokemon_species"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("evolution_chains", "evolution_chain_id"),
        _belongs_to("generations", "generation_id"),
        _belongs_to("growth_rates", "growth_rate_id"),
        _has_many("pokemon", "species_id"),
        _belongs_to("pokemon_colors", "color_id"),
        _has_many("pokemon_egg_groups", "species_id"),
        _belongs_to("pokemon_habitats", "habitat_id"),
        _belongs_to("pokemon_shapes", "shape_id"),
        _belongs_to("pokemon_species", "evolves_from_species_id", name="self_ref"),
        _has_many("pokemon_species_flavor_text", "species_id"),
        _has_many("pokemon_species_names", "pokemon_species_id"),
        _via("egg_groups", "pokemon_egg_groups"),
        _via("languages", "pokemon_species_names"),
    )

    id: int
    identifier: str
    generation_id: int
    evolves_from_species_id: int | None
    evolution_chain_id: int | None
    color_id: int
    shape_id: int
    habitat_id: int | None
    gender_rate: int | None
    capture_rate: int | None
    base_happiness: int | None
    is_baby: bool
    hatch_counter: int
    has_gender_differences: bool
    growth_rate_id: int
    forms_switchable: bool
    is_legendary: bool
    is_mythical: bool
    order: int
    conquest_order: int | None


@dataclass(frozen=True)
class PokemonSpeciesName(Entity):
    table_name: ClassVar[str] = "pokemon_species_names"
    primary_key: ClassVar[tuple[str, ...]] = ("pokemon_species_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("pokemon_species", "pokemon_species_id"),
    )

    pokemon_species_id: int
    local_language_id: int
    name: str


@dataclass(frozen=True)
class PokemonSpeciesFlavorText(Entity):
    table_name: ClassVar[str] = "pokemon_species_flavor_text"
    primary_key: ClassVar[tuple[str, ...]] = ("species_id", "version_id", "language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "language_id"),
        _belongs_to("pokemon_species", "species_id"),
        _belongs_to("versions", "version_id"),
    )

    species_id: int
    version_id: int
    language_id: int
    flavor_text: str


@dataclass(frozen=True)
class PokemonColor(Entity):
    table_name: ClassVar[str] = "pokemon_colors"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _has_many("pokemon_color_names", "pokemon_color_id"),
        _has_many("pokemon_species", "color_id"),
        _via("languages", "pokemon_color_names"),
    )

    id: int
    identifier: str


@dataclass(frozen=True)
class PokemonColorName(Entity):
    table_name: ClassVar[str] = "pokemon_color_names"
    primary_key: ClassVar[tuple[str, ...]] = ("pokemon_color_id", "local_language_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("languages", "local_language_id"),
        _belongs_to("pokemon_colors", "pokemon_color_id"),
    )

    pokemon_color_id: int
    local_language_id: int
    name: str


@dataclass(frozen=True)
class PokemonEggGroup(Entity):
    table_name: ClassVar[str] = "pokemon_egg_groups"
    primary_key: ClassVar[tuple[str, ...]] = ("species_id", "egg_group_id")
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("egg_groups", "egg_group_id"),
        _belongs_to("pokemon_species", "species_id"),
    )

    species_id: int
    egg_group_id: int


@dataclass(frozen=True)
class PokemonEvolution(Entity):
    table_name: ClassVar[str] = "pokemon_evolution"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (
        _belongs_to("evolution_triggers", "evolution_trigger_id"),
        _belongs_to("items", "trigger_item_id", name="items2"),
        _belongs_to("items", "held_item_id", name="items1"),
        _belongs_to("locations", "location_id"),
        _belongs_to("pokemon_species", "trade_species_id", name="pokemon_species3"),
        _belongs_to("pokemon_species", "party_species_id", name="pokemon_species2"),
        _belongs_to("pokemon_species", "evolved_species_id", name="pokemon_species1"),
        _belongs_to("types", "party_type_id"),
    )

    id: int
    evolved_species_id: int
    evolution_trigger_id: int
    trigger_item_id: int | None
    minimum_level: int | None
    gender_id: int | None
    location_id: int | None
    held_item_id: int | None
    time_of_day: str | None
    known_move_id: int | None
    known_move_type_id: int | None
    minimum_happiness: int | None
    minimum_beauty: int | None
    minimum_affection: int | None
    relative_physical_stats: int | None
    party_species_id: int | None
    party_type_id: int | None
    trade_species_id: int | None
    needs_overworld_rain: bool | None
    turn_upside_down: bool | None


@dataclass(frozen=True)
class PokemonHabitat(Entity):
    table_name: ClassVar[str] = "pokemon_habitats"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (_has_many("pokemon_species", "habitat_id"),)

    id: int
    identifier: str


@dataclass(frozen=True)
class PokemonShape(Entity):
    table_name: ClassVar[str] = "pokemon_shapes"
    primary_key: ClassVar[tuple[str, ...]] = ("id",)
    relations: ClassVar[tuple[Relation, ...]] = (_has_many("pokemon_species", "shape_id"),)

    id: int
    identifier: str