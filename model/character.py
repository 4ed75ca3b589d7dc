from enum import Enum
from typing import Dict

from sqlmodel import SQLModel, Field

from errors import RatingError

MIN_DOTS = 1
MAX_DOTS = 5

ATTRIBUTES = ('physical', 'social', 'mental')

SHEET_WIDTH = 40


class SkillTier(str, Enum):
    TALENTS = 'talents'
    SKILLS = 'skills'
    KNOWLEDGES = 'knowledges'

    @property
    def heading(self) -> str:
        return _TIER_HEADINGS[self]


_TIER_HEADINGS = {
    SkillTier.TALENTS: 'TALENTS (Innate)',
    SkillTier.SKILLS: 'SKILLS (Trained)',
    SkillTier.KNOWLEDGES: 'KNOWLEDGES (Academic)',
}

STANDARD_SKILLS = {
    SkillTier.TALENTS: ('Athletics', 'Awareness', 'Brawl', 'Streetwise'),
    SkillTier.SKILLS: ('Combat', 'Stealth', 'Survival', 'Performance'),
    SkillTier.KNOWLEDGES: ('Academics', 'Science', 'Investigation', 'Occult'),
}


class Character(SQLModel):
    """
    A player character rated on the 1-5 dot scale.

    Attributes start at 1 and skill tiers start empty. Fields can be assigned
    directly without any range check; set_attribute and set_skill validate.
    """

    name: str = Field()

    physical: int = Field(default=1)
    social: int = Field(default=1)
    mental: int = Field(default=1)

    talents: Dict[str, int] = Field(default_factory=dict)
    skills: Dict[str, int] = Field(default_factory=dict)
    knowledges: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def new(cls, name: str) -> 'Character':
        return cls(name=name)

    def tier(self, tier) -> Dict[str, int]:
        """Return the live skill mapping for ``tier`` (a SkillTier or its value)."""
        try:
            tier = SkillTier(tier.lower() if isinstance(tier, str) else tier)
        except ValueError:
            raise RatingError(f"Unknown skill tier '{tier}'") from None
        return getattr(self, tier.value)

    def set_attribute(self, attribute: str, value: int):
        attribute = attribute.lower()
        if attribute not in ATTRIBUTES:
            raise RatingError(f"Unknown attribute '{attribute}'")
        _check_dots(attribute, value)
        setattr(self, attribute, value)

    def set_skill(self, tier, skill: str, value: int):
        skills = self.tier(tier)
        if not skill:
            raise RatingError('Skill name cannot be empty')
        _check_dots(skill, value)
        skills[skill] = value

    def display(self) -> str:
        """
        Render the character sheet as box-drawn text.

        Lists the name, the three attributes and every skill tier that has at
        least one rating. Each rating shows as dots followed by the number,
        e.g. ``●●● (3)``.
        """
        lines = [
            _border('╔', '╗'),
            _row('CHARACTER SHEET'),
            _border('╠', '╣'),
            _row(f'Name: {self.name}'),
            _border('╠', '╣'),
            _row('ATTRIBUTES'),
            _border('╠', '╣'),
        ]
        lines.extend(_rating_rows(
            [(attribute.capitalize(), getattr(self, attribute)) for attribute in ATTRIBUTES]))

        for tier in SkillTier:
            ratings = self.tier(tier)
            if not ratings:
                continue
            lines.append(_border('╠', '╣'))
            lines.append(_row(tier.heading))
            lines.append(_border('╠', '╣'))
            lines.extend(_rating_rows(list(ratings.items())))

        lines.append(_border('╚', '╝'))
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.display()


def format_dots(value: int) -> str:
    return f"{'●' * max(value, 0)} ({value})"


def _check_dots(label: str, value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise RatingError(f"{label} must be an integer, got {value!r}")
    if not MIN_DOTS <= value <= MAX_DOTS:
        raise RatingError(f"{label} must be between {MIN_DOTS} and {MAX_DOTS}, got {value}")


def _border(left: str, right: str) -> str:
    return left + '═' * SHEET_WIDTH + right


def _row(text: str) -> str:
    return '║' + f'  {text}'.ljust(SHEET_WIDTH) + '║'


def _rating_rows(ratings) -> list:
    # align the dots of one section on its longest label
    label_width = max(len(label) for label, _ in ratings) + 2
    return [_row(f'{label + ":":<{label_width}}{format_dots(value)}') for label, value in ratings]
