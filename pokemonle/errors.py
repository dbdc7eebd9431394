"""Errors raised by the pokemonle library."""


class PokemonleError(Exception):
    """Base class of every error raised by this package."""


class EnvVarMissingError(PokemonleError):
    """A required environment variable is not set."""

    def __init__(self, name: str, reason: str = "environment variable not found") -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Env var '{name}' does not exist; {reason}")


class EnvVarEmptyError(PokemonleError):
    """A required environment variable is set but empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Env var '{name}' is empty")


class DatabaseError(PokemonleError):
    """A failure reported by the database layer; the message is the cause's own."""

    def __init__(self, source: BaseException | str) -> None:
        self.source = source
        super().__init__(str(source))
        if isinstance(source, BaseException):
            self.__cause__ = source


class ResourceNotFoundError(PokemonleError, LookupError):
    """A requested record does not exist."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Resource not found: {detail}")


class UnsupportedDatabaseError(PokemonleError):
    """The database URL names a backend that is not supported."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Unsupported database url '{url}'")