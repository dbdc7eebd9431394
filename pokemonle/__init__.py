"""Typed read-only access to a Pokédex SQLite database: table models, localized names and pagination."""

__version__ = "0.1.0"

__all__ = [
    "database",
    "entity",
    "errors",
    "models_moves",
    "models_pokemon",
    "models_species",
    "models_world",
    "types",
]