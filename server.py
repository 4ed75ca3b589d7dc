import json
import logging

from mcp.server.fastmcp import FastMCP

from model.character import ATTRIBUTES, STANDARD_SKILLS, Character
from service import character_service
from service.repository_service import SCHEMA_TABLES, Database

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "character",
    instructions="""
        # You keep the character sheets for a World of Darkness style tabletop game.

        ## Data
        character : a character sheet, stored per game_name. Attributes are physical, social and mental.
        Skills are grouped into three tiers: talents (innate), skills (trained) and knowledges (academic).

        ## Rules
        - Every rating uses the dot scale from 1 to 5. A new character starts with every attribute at 1
          and no skills.
        - Create a character with create_character before adjusting it.
        - Use set_attribute and set_skill to change ratings; never invent ratings outside 1 to 5.
        - Show the sheet with get_character_sheet after changing a character.
        """)

_database = None


def bind_database(db: Database):
    global _database
    _database = db


def get_database() -> Database:
    if _database is None:
        raise RuntimeError('No database bound; call bind_database() before serving')
    return _database


def _require(value: str, label: str):
    if not value or not value.strip():
        raise ValueError(f'{label} cannot be empty')


def _sheet_response(character: Character, game_name: str) -> str:
    return json.dumps({
        'game_name': game_name,
        'character': character.model_dump(),
        'sheet': character.display(),
    }, ensure_ascii=False)


@mcp.resource("schema://main")
def get_schema() -> str:
    """
    Every table of the store with its columns, plus the rating names a character sheet accepts.
    """

    result = []
    for table in SCHEMA_TABLES:
        table_info = {
            "table_name": table.name,
            "columns": []
        }

        for column in table.columns:
            table_info["columns"].append({
                "name": column.name,
                "type": str(column.type),
                "nullable": column.nullable,
                "primary_key": column.primary_key,
            })

        result.append(table_info)

    return json.dumps({
        "tables": result,
        "attributes": list(ATTRIBUTES),
        "standard_skills": {tier.value: list(skills) for tier, skills in STANDARD_SKILLS.items()},
    })


@mcp.tool()
def create_character(game_name: str, character_name: str) -> str:
    """
    Create a character in game_name with every attribute at 1 and empty skill tiers.
    An existing character with the same name is reset.
    """
    _require(character_name, 'Character name')
    _require(game_name, 'Game name')

    character = Character.new(character_name)
    character_service.save_character(get_database(), character, game_name)

    logger.info('Created character %s in game %s', character_name, game_name)
    return _sheet_response(character, game_name)


@mcp.tool()
def set_attribute(game_name: str, character_name: str, attribute: str, value: int) -> str:
    """
    Set physical, social or mental to a rating between 1 and 5.
    """
    _require(character_name, 'Character name')
    _require(game_name, 'Game name')

    db = get_database()
    character = character_service.load_character(db, character_name, game_name)
    character.set_attribute(attribute, value)
    character_service.save_character(db, character, game_name)

    return _sheet_response(character, game_name)


@mcp.tool()
def set_skill(game_name: str, character_name: str, tier: str, skill: str, value: int) -> str:
    """
    Set a skill rating between 1 and 5. tier is one of talents, skills or knowledges.
    See schema://main for the standard skill names of each tier.
    """
    _require(character_name, 'Character name')
    _require(game_name, 'Game name')

    db = get_database()
    character = character_service.load_character(db, character_name, game_name)
    character.set_skill(tier, skill, value)
    character_service.save_character(db, character, game_name)

    return _sheet_response(character, game_name)


@mcp.tool()
def get_character_sheet(game_name: str, character_name: str) -> str:
    """
    Return the stored character with its rendered sheet.
    """
    _require(character_name, 'Character name')
    _require(game_name, 'Game name')

    character = character_service.load_character(get_database(), character_name, game_name)
    return _sheet_response(character, game_name)


@mcp.tool()
def list_characters(game_name: str) -> str:
    _require(game_name, 'Game name')

    return json.dumps(character_service.list_characters(get_database(), game_name), ensure_ascii=False)


@mcp.tool()
def delete_character(game_name: str, character_name: str) -> str:
    _require(character_name, 'Character name')
    _require(game_name, 'Game name')

    character_service.delete_character(get_database(), character_name, game_name)

    logger.info('Deleted character %s from game %s', character_name, game_name)
    return json.dumps({'deleted': character_name, 'game_name': game_name}, ensure_ascii=False)


def serve(db: Database):
    bind_database(db)
    logger.info('Serving character tools over stdio')
    mcp.run()
