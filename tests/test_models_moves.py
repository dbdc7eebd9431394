import sqlite3

import pytest

from pokemonle.entity import RelationKind
from pokemonle.models_moves import (
    Move,
    MoveName,
    MoveTarget,
    PokemonMove,
    PokemonMoveMethod,
)


def test_table_names():
    assert Move.table_name == "moves"
    assert MoveName.table_name == "move_names"
    assert MoveTarget.table_name == "move_targets"
    assert PokemonMoveMethod.table_name == "pokemon_move_methods"
    assert PokemonMove.table_name == "pokemon_moves"
    assert MoveTarget.struct_name() == "MoveTarget"
    assert PokemonMoveMethod.struct_name() == "PokemonMoveMethod"


def test_move_name_columns():
    assert MoveName.columns() == ("move_id", "local_language_id", "name")
    assert MoveName.primary_key == ("move_id", "local_language_id")


@pytest.mark.parametrize(
    "model", [Move, MoveName, MoveTarget, PokemonMoveMethod, PokemonMove]
)
def test_primary_key_columns_exist(model):
    assert set(model.primary_key) <= set(model.columns())


@pytest.mark.parametrize(
    "model", [Move, MoveName, MoveTarget, PokemonMoveMethod, PokemonMove]
)
def test_relation_columns_exist(model):
    columns = model.columns()
    for relation in model.relations:
        if relation.kind is RelationKind.BELONGS_TO:
            assert relation.from_column in columns
        elif relation.kind is RelationKind.HAS_MANY:
            assert relation.from_column == "id"


def test_move_target_relation():
    targets = {r.target: r for r in Move.relations if r.kind is RelationKind.BELONGS_TO}
    assert targets["move_targets"].from_column == "target_id"
    assert targets["types"].from_column == "type_id"
    assert targets["move_targets"].from_column in Move.columns()


def test_move_languages_via_names():
    via = [r for r in Move.relations if r.kind is RelationKind.MANY_TO_MANY]
    assert [(r.target, r.via) for r in via] == [("languages", "move_names")]
    assert "local_language_id" in MoveName.columns()


def test_pokemon_move_from_sqlite_round_trip():
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.execute(
        "CREATE TABLE pokemon_moves (pokemon_id, version_group_id, move_id, "
        "pokemon_move_method_id, level, \"order\", mastery)"
    )
    conn.execute("INSERT INTO pokemon_moves VALUES (25, 20, 85, 1, 26, NULL, NULL)")
    row = conn.execute("SELECT * FROM pokemon_moves").fetchone()
    conn.close()
    record = PokemonMove.from_row(row)
    assert record.primary_key_values() == (25, 20, 85, 1, 26)
    assert record.order is None
    assert PokemonMove.from_row(record.to_dict()) == record


def test_move_round_trip():
    move = Move(
        id=1, identifier="pound", generation_id=1, type_id=1, power=40, pp=35,
        accuracy=100, priority=0, target_id=10, damage_class_id=2, effect_id=1,
        effect_chance=None, contest_type_id=5, contest_effect_id=1,
    )
    assert Move.from_row(move.to_dict()) == move
    assert move.primary_key_values() == (1,)
    assert Move.struct_name() == "Move"