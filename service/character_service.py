import logging

from sqlmodel import select

from errors import CharacterNotFoundError
from model.character import Character
from model.character_record import CharacterRecord
from service.repository_service import Database

logger = logging.getLogger(__name__)


def save_character(db: Database, character: Character, game_name: str) -> CharacterRecord:
    """Insert the character's sheet or replace the stored one."""
    with db.session() as session:
        record = session.get(CharacterRecord, (game_name, character.name))

        if record is None:
            record = CharacterRecord(game_name=game_name, name=character.name)

        record.sheet = character.model_dump_json()

        session.add(record)
        session.commit()
        session.refresh(record)

    logger.debug('Saved character %s in game %s', character.name, game_name)
    return record


def load_character(db: Database, name: str, game_name: str) -> Character:
    with db.session() as session:
        record = session.get(CharacterRecord, (game_name, name))

        if record is None:
            raise CharacterNotFoundError(f"Character '{name}' not found in game '{game_name}'")

        return Character.model_validate_json(record.sheet)


def list_characters(db: Database, game_name: str) -> list:
    with db.session() as session:
        names = session.exec(
            select(CharacterRecord.name)
            .where(CharacterRecord.game_name == game_name)
            .order_by(CharacterRecord.name)
        ).all()

    return list(names)


def delete_character(db: Database, name: str, game_name: str):
    with db.session() as session:
        record = session.get(CharacterRecord, (game_name, name))

        if record is None:
            raise CharacterNotFoundError(f"Character '{name}' not found in game '{game_name}'")

        session.delete(record)
        session.commit()

    logger.debug('Deleted character %s from game %s', name, game_name)
