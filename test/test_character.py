import pytest

from errors import RatingError
from model.character import STANDARD_SKILLS, Character, SkillTier, format_dots


@pytest.mark.parametrize("name", ["Mira", "", "Veteran Investigator", "뉴뉴큥"])
def test_new_character_defaults(name):
    character = Character.new(name)

    assert character.name == name
    assert character.physical == 1
    assert character.social == 1
    assert character.mental == 1
    assert character.talents == {}
    assert character.skills == {}
    assert character.knowledges == {}


def test_skill_maps_are_not_shared_between_characters():
    first = Character.new("First")
    second = Character.new("Second")

    first.talents["Brawl"] = 3

    assert second.talents == {}


def test_direct_mutation_is_visible_and_unchecked():
    character = Character(name="Skilled Fighter")

    character.physical = 4
    character.social = 0
    character.mental = 9
    character.skills["Combat"] = 5

    assert character.physical == 4
    assert character.social == 0
    assert character.mental == 9
    assert character.skills == {"Combat": 5}


def test_set_attribute_validates_range():
    character = Character.new("Eldric")

    character.set_attribute("Physical", 5)
    assert character.physical == 5

    with pytest.raises(RatingError):
        character.set_attribute("physical", 6)
    with pytest.raises(RatingError):
        character.set_attribute("mental", 0)
    with pytest.raises(RatingError):
        character.set_attribute("luck", 3)

    assert character.physical == 5
    assert character.mental == 1


def test_set_skill_validates_tier_and_range():
    character = Character.new("Eldric")

    character.set_skill(SkillTier.KNOWLEDGES, "Occult", 4)
    character.set_skill("talents", "Awareness", 2)

    assert character.knowledges == {"Occult": 4}
    assert character.talents == {"Awareness": 2}

    with pytest.raises(RatingError):
        character.set_skill("knowledges", "Science", 7)
    with pytest.raises(RatingError):
        character.set_skill("backgrounds", "Resources", 2)
    with pytest.raises(RatingError):
        character.set_skill("skills", "", 2)
    with pytest.raises(RatingError):
        character.set_skill("skills", "Stealth", True)

    assert character.knowledges == {"Occult": 4}
    assert character.skills == {}


def test_rating_error_is_a_value_error():
    with pytest.raises(ValueError):
        Character.new("Eldric").set_attribute("social", -1)


def test_format_dots():
    assert format_dots(3) == "●●● (3)"
    assert format_dots(0) == " (0)"


def test_display_shows_example_sheet():
    character = Character.new("Mira")
    character.mental = 4
    character.knowledges["Academics"] = 3

    sheet = character.display()

    assert "Name: Mira" in sheet
    assert "Physical: ● (1)" in sheet
    assert "Social:   ● (1)" in sheet
    assert "Mental:   ●●●● (4)" in sheet
    assert "KNOWLEDGES (Academic)" in sheet
    assert "Academics: ●●● (3)" in sheet


def test_display_skips_empty_tiers():
    sheet = Character.new("Default Character").display()

    assert "ATTRIBUTES" in sheet
    assert "TALENTS" not in sheet
    assert "SKILLS" not in sheet
    assert "KNOWLEDGES" not in sheet


def test_display_is_box_drawn_with_even_width():
    character = Character.new("Veteran Investigator")
    for tier, skills in STANDARD_SKILLS.items():
        for skill in skills:
            character.set_skill(tier, skill, 5)

    lines = character.display().splitlines()

    assert lines[0].startswith("╔") and lines[0].endswith("╗")
    assert lines[-1].startswith("╚") and lines[-1].endswith("╝")
    assert len({len(line) for line in lines}) == 1
    assert all(line[0] in "╔║╠╚" for line in lines)


def test_display_is_pure():
    character = Character.new("Mira")
    character.set_skill("skills", "Stealth", 3)

    assert character.display() == character.display()
    assert str(character) == character.display()

    character.set_skill("skills", "Stealth", 4)
    assert "Stealth: ●●●● (4)" in character.display()


def test_json_round_trip_keeps_skill_order():
    character = Character.new("Mira")
    character.set_skill("talents", "Streetwise", 2)
    character.set_skill("talents", "Athletics", 1)

    restored = Character.model_validate_json(character.model_dump_json())

    assert restored.model_dump() == character.model_dump()
    assert list(restored.talents) == ["Streetwise", "Athletics"]
