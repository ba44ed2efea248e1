from __future__ import annotations


class GameEngineError(Exception):
    """Base class for engine errors."""
    pass


class InvalidConfigurationError(GameEngineError):
    """Game setup parameters cannot produce a playable game."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        super().__init__("; ".join(errors))


class NoSpaceAvailableError(GameEngineError):
    """No neutral tile is left to spawn a player on."""
    pass


class GameNotActiveError(GameEngineError):
    """Turn attempted after the game has finished."""
    pass
