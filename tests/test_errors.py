import sqlite3

import pytest

from pokemonle.errors import (
    DatabaseError,
    EnvVarEmptyError,
    EnvVarMissingError,
    PokemonleError,
    ResourceNotFoundError,
    UnsupportedDatabaseError,
)


def test_resource_not_found_message():
    err = ResourceNotFoundError("resource 7 not found")
    assert str(err) == "Resource not found: resource 7 not found"
    assert err.detail == "resource 7 not found"


def test_resource_not_found_is_lookup_error():
    err = ResourceNotFoundError("Latest version not found")
    assert isinstance(err, LookupError)
    assert isinstance(err, PokemonleError)
    assert err.detail == "Latest version not found"
    assert str(err) == "Resource not found: Latest version not found"


def test_env_var_empty_message():
    err = EnvVarEmptyError("DATABASE_URL")
    assert str(err) == "Env var 'DATABASE_URL' is empty"
    assert err.name == "DATABASE_URL"


def test_env_var_missing_message_includes_reason():
    err = EnvVarMissingError("DATABASE_URL", "not present")
    assert str(err) == "Env var 'DATABASE_URL' does not exist; not present"
    assert err.reason == "not present"


def test_unsupported_database_message():
    err = UnsupportedDatabaseError("mysql://localhost/db")
    assert str(err) == "Unsupported database url 'mysql://localhost/db'"
    assert err.url == "mysql://localhost/db"


def test_database_error_is_transparent():
    cause = sqlite3.OperationalError("no such table: moves")
    err = DatabaseError(cause)
    assert str(err) == str(cause)
    assert err.__cause__ is cause
    assert err.source is cause


@pytest.mark.parametrize(
    "err, message",
    [
        (EnvVarEmptyError("A"), "Env var 'A' is empty"),
        (EnvVarMissingError("A", "gone"), "Env var 'A' does not exist; gone"),
        (DatabaseError(sqlite3.OperationalError("boom")), "boom"),
        (ResourceNotFoundError("x"), "Resource not found: x"),
        (UnsupportedDatabaseError("x"), "Unsupported database url 'x'"),
    ],
)
def test_all_errors_share_base(err, message):
    with pytest.raises(PokemonleError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == message