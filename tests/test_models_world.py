import pytest

from pokemonle.entity import RelationKind
from pokemonle.models_moves import Move
from pokemonle.models_pokemon import Pokemon
from pokemonle.models_species import PokemonSpecies
from pokemonle.models_world import (
    Pokedex,
    PokedexVersionGroup,
    Region,
    RegionName,
    Version,
    VersionGroup,
    VersionGroupName,
    VersionName,
    entity_for_table,
)

WORLD = [
    Pokedex,
    PokedexVersionGroup,
    Region,
    RegionName,
    VersionGroup,
    VersionGroupName,
    Version,
    VersionName,
]


def _relation(entity, name):
    return next(rel for rel in entity.relations if rel.name == name)


def test_table_names():
    names = [
        "pokedexes",
        "pokedex_version_groups",
        "regions",
        "region_names",
        "version_groups",
        "version_group_names",
        "versions",
        "version_names",
    ]
    assert [entity.table_name for entity in WORLD] == names
    assert [entity_for_table(name) for name in names] == WORLD


def test_pokedex_from_row_converts_bool():
    dex = Pokedex.from_row({"id": 2, "region_id": None, "identifier": "kanto", "is_main_series": 1})
    assert dex.is_main_series is True
    assert dex.region_id is None
    assert dex.primary_key_values() == (2,)


def test_pokedex_columns_in_order():
    assert Pokedex.columns() == ("id", "region_id", "identifier", "is_main_series")


def test_pokedex_version_group_composite_key():
    row = PokedexVersionGroup(pokedex_id=3, version_group_id=5)
    assert row.primary_key_values() == (3, 5)
    assert PokedexVersionGroup.from_row(row.to_dict()) == row


@pytest.mark.parametrize(
    "entity,row",
    [
        (Region, {"id": 1, "identifier": "kanto"}),
        (RegionName, {"region_id": 1, "local_language_id": 9, "name": "Kanto"}),
        (VersionGroup, {"id": 1, "identifier": "red-blue", "generation_id": 1, "order": 1}),
        (VersionGroupName, {"version_group_id": 1, "local_language_id": 9, "name": "Red/Blue"}),
        (Version, {"id": 1, "version_group_id": 1, "identifier": "red"}),
        (VersionName, {"version_id": 1, "local_language_id": 9, "name": "Red"}),
    ],
)
def test_round_trip(entity, row):
    record = entity.from_row(row)
    assert record.to_dict() == row
    assert record.primary_key_values() == tuple(row[k] for k in entity.primary_key)


def test_from_row_missing_column():
    with pytest.raises(KeyError):
        Version.from_row({"id": 1, "identifier": "red"})


def test_pokedex_relations():
    region = _relation(Pokedex, "regions")
    assert region.kind is RelationKind.BELONGS_TO
    assert region.from_column == "region_id"
    assert region.from_column in Pokedex.columns()
    via = _relation(Pokedex, "version_groups")
    assert via.kind is RelationKind.MANY_TO_MANY
    assert via.via == "pokedex_version_groups"


def test_version_group_relations():
    names = {rel.name for rel in VersionGroup.relations}
    assert {"versions", "pokemon_moves", "pokedexes", "languages", "generations"} <= names
    versions = _relation(VersionGroup, "versions")
    assert versions.kind is RelationKind.HAS_MANY
    assert versions.to_column == "version_group_id"
    assert versions.to_column in Version.columns()


def test_version_belongs_to_group():
    rel = _relation(Version, "version_groups")
    assert rel.kind is RelationKind.BELONGS_TO
    assert rel.from_column == "version_group_id"
    assert rel.to_column == "id"
    assert rel.from_column in Version.columns()
    assert rel.to_column in VersionGroup.columns()


@pytest.mark.parametrize("entity", [RegionName, VersionGroupName, VersionName])
def test_name_tables_link_languages(entity):
    rel = _relation(entity, "languages")
    assert rel.from_column == "local_language_id"
    assert rel.from_column in entity.columns()


@pytest.mark.parametrize("entity", WORLD + [Move, Pokemon, PokemonSpecies])
def test_entity_for_table_finds_each(entity):
    assert entity_for_table(entity.table_name) is entity


def test_entity_for_table_unknown():
    with pytest.raises(KeyError):
        entity_for_table("no_such_table")


def test_frozen_records():
    region = Region(id=1, identifier="kanto")
    with pytest.raises(AttributeError):
        region.identifier = "johto"
    assert region.identifier == "kanto"