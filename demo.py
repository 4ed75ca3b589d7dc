"""
Terminal demo: bootstraps the store and prints two character sheets.
"""
from config.settings import Settings
from model.character import Character, SkillTier
from service.repository_service import Database

INVESTIGATOR_RATINGS = {
    SkillTier.TALENTS: {'Athletics': 2, 'Awareness': 4, 'Brawl': 2, 'Streetwise': 3},
    SkillTier.SKILLS: {'Combat': 2, 'Stealth': 3, 'Survival': 2, 'Performance': 2},
    SkillTier.KNOWLEDGES: {'Academics': 3, 'Science': 3, 'Investigation': 5, 'Occult': 4},
}


def build_investigator() -> Character:
    character = Character.new('Veteran Investigator')

    character.physical = 2
    character.social = 3
    character.mental = 4

    for tier, ratings in INVESTIGATOR_RATINGS.items():
        for skill, value in ratings.items():
            character.set_skill(tier, skill, value)

    return character


def run_demo(settings: Settings):
    """Raises StorageInitError when the store at ``settings.db_path`` cannot be bootstrapped."""
    print('=== TTRPG System Demo ===\n')

    with Database.init(settings.db_path):
        default_character = Character.new('Default Character')
        print('Created a new character with default stats:\n')
        print(default_character.display())

        print('\n')

        print('Created a customized character:\n')
        print(build_investigator().display())

    print('\n=== Demo Complete ===')
