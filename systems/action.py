import logging
from typing import Protocol, runtime_checkable

from model.character import Character

logger = logging.getLogger(__name__)


@runtime_checkable
class ResolvableAction(Protocol):
    """
    A game action that can be resolved against a character.

    Dice rolls, combat and other mechanics plug in here; none ship yet.
    """

    name: str

    def resolve(self, actor: Character) -> object:
        ...


def resolve(action: ResolvableAction, actor: Character) -> object:
    if not isinstance(action, ResolvableAction):
        raise TypeError(f'{type(action).__name__} is not a resolvable action')

    logger.debug('Resolving %s for %s', action.name, actor.name)
    return action.resolve(actor)
