# pokemonle

`pokemonle` gives typed, read-only access to a Pokédex stored in an SQLite
database. Each table is a frozen dataclass. Localized resources come back
with their name in the language you ask for. List queries come back as
paginated results.

## Modules

- `pokemonle.entity` holds the base classes.
  - `Entity` is the base class of every table model. Its class methods are
    `struct_name()`, `tags()`, `columns()` and `from_row(row)`. `from_row`
    accepts a mapping or an `sqlite3.Row`, and turns columns declared as
    `bool` into booleans. Its instance methods are `to_dict()` and
    `primary_key_values()`.
  - `Relation` and `RelationKind` (`BELONGS_TO`, `HAS_MANY`, `MANY_TO_MANY`)
    describe how the tables link to each other. Each model lists its
    relations in its `relations` class attribute.
- The table models are grouped into four modules:
  - `pokemonle.models_moves`: `Move`, `MoveName`, `MoveTarget`,
    `PokemonMoveMethod`, `PokemonMove`
  - `pokemonle.models_pokemon`: `Pokemon`, `PokemonAbility`, `PokemonStat`,
    `PokemonType`, `Stat`, `Type`, `TypeName`
  - `pokemonle.models_species`: `PokemonSpecies`, `PokemonSpeciesName`,
    `PokemonSpeciesFlavorText`, `PokemonColor`, `PokemonColorName`,
    `PokemonEggGroup`, `PokemonEvolution`, `PokemonHabitat`, `PokemonShape`
  - `pokemonle.models_world`: `Pokedex`, `PokedexVersionGroup`, `Region`,
    `RegionName`, `VersionGroup`, `VersionGroupName`, `Version`,
    `VersionName`. This module also has `entity_for_table(table_name)`,
    which returns the model for a table name and raises `KeyError` for an
    unknown table.
- `pokemonle.types` holds the result and query types.
  - `PaginatedResource` has the fields `data`, `page`, `per_page`,
    `total_pages` and `total_items`, and the methods `from_list`, `map`,
    `map_data` and `to_dict`.
  - `WithName` holds an `item` and its `name`. Use `from_tuple` to build
    one from a pair.
  - `WithSlot` holds an `item`, a `slot` and an `is_hidden` flag.
  - The query types are `PaginateQuery`, `LanguageQuery`, `SearchQuery`,
    `ResourceId`, `VersionQuery` and `VersionGroupQuery`.
    `PaginateQuery.from_mapping` defaults to page 1 with 25 per page.
    `LanguageQuery.from_mapping` defaults to language 12. Both accept
    integers or numeric strings and raise `ValueError` otherwise.
    `PaginateQuery` also rejects negative values.
- `pokemonle.database` holds `connect(url)` and `DatabaseClient`.
- `pokemonle.errors` holds `PokemonleError` and its subclasses:
  `ResourceNotFoundError` (also a `LookupError`), `DatabaseError`,
  `UnsupportedDatabaseError`, `EnvVarMissingError` and `EnvVarEmptyError`.

## Usage

```python
from pokemonle.database import connect
from pokemonle.errors import ResourceNotFoundError
from pokemonle.models_moves import Move
from pokemonle.models_species import PokemonSpecies

with connect("sqlite:///pokedex.sqlite") as client:
    # Plain pagination over a table; the page index counts from zero
    page = client.list_with_pagination(Move, 0, 25)
    print(page.total_items, [m.identifier for m in page.data])

    # Localized listing filtered by a substring of the name; pages count from one
    species = client.list_localized(PokemonSpecies, 1, 25, 12, "chu")
    for entry in species.data:
        print(entry.item.id, entry.name)

    pikachu = client.get_localized(PokemonSpecies, 25, 12)
    print(pikachu.name)

    # Every species in an evolution chain, with names
    chain = client.get_pokemon_species_by_evolution_chain_id(10, 12)

    # Pokémon that learn a move; None picks the move's newest version group
    learners = client.get_pokemons_by_move_id(85, None, 1, 25, 12)

    text = client.get_pokemon_species_flavor_text(25, 1, 9)
    latest = client.get_latest_version()
    latest_group = client.get_latest_version_group()

    try:
        client.get_by_id(Move, 999_999)
    except ResourceNotFoundError as exc:
        print("not found:", exc)
```

### Connecting

`connect` accepts only `sqlite:` URLs, for example `sqlite:///pokedex.sqlite`
or `sqlite:path.db?mode=ro`. A query string, if present, is passed to SQLite
as URI parameters. Any other scheme, or a URL with no path, raises
`UnsupportedDatabaseError`. `DatabaseClient` can also wrap an open
`sqlite3.Connection` directly. It works as a context manager and closes the
connection on exit. SQLite errors are raised as `DatabaseError`.

### Queries

- `list_with_pagination(entity, page, limit)` and `get_by_id(entity,
  resource_id)` work on any model.
  - The rows are ordered by primary key.
  - `get_by_id` needs a single-column primary key. Otherwise it raises
    `TypeError`.
- `list_localized` and `get_localized` work on four models:
  `PokemonSpecies`, `Move`, `Region` and `Version`. Any other model raises
  `TypeError`.
  - Only records that have a name in the requested language are returned.
  - `get_localized` raises `ResourceNotFoundError` when the record, or its
    name in that language, is missing.
- `get_pokemon_species_by_evolution_chain_id` returns the whole chain as a
  single page. It reports page 1 with 25 per page.
- `get_pokemons_by_move_id` without a version group uses the highest
  version group recorded for that move.
- Missing records raise `ResourceNotFoundError`.
- A page size below 1 raises `ValueError`. So does a page below the first
  page.

## Results as plain data

`PaginatedResource`, `WithName`, `WithSlot` and every entity have a
`to_dict()` method that returns plain dictionaries. In `WithName` and
`WithSlot`, the item's fields are flattened next to the extra fields.

`PaginatedResource.map(func)` applies `func` to each item.
`PaginatedResource.map_data(func)` applies `func` to the whole list. Both
return a new page and keep the paging fields unchanged.
`PaginatedResource.from_list(data)` wraps a complete list as one page.

## What the package does not do

- It only reads. It does not create the schema, migrate it or load data.
  You need an SQLite file that already has the Pokédex tables.
- It does not read configuration from environment variables. The
  `EnvVarMissingError` and `EnvVarEmptyError` classes exist, but no function
  in the package raises them.
- It has no HTTP server and no command-line tool.
- It has no models for abilities, items, languages, locations,
  generations, berries or encounters. Relations may name those tables, but
  the package cannot query them.