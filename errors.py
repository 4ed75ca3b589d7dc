"""
Exceptions raised by the character and storage layers.
"""


class GameError(Exception):
    """Base class for every error raised by this project."""
    pass


class StorageInitError(GameError):
    """The SQLite store could not be created or opened."""
    pass


class CharacterNotFoundError(GameError):
    """No stored character matches the requested name."""
    pass


class RatingError(GameError, ValueError):
    """A rating or rating name is outside the dot scale."""
    pass
