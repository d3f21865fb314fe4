"""Reading levels and their per-level profiles."""

from dataclasses import dataclass
from enum import Enum


class ReadingLevel(str, Enum):
    """Target audience tiers for simplification."""

    GRADE3 = "grade3"
    MIDDLE_SCHOOL = "middle-school"
    HIGH_SCHOOL = "high-school"
    COLLEGE = "college"


class Difficulty(str, Enum):
    """Difficulty label attached to vocabulary entries."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


DEFAULT_LEVEL = ReadingLevel.MIDDLE_SCHOOL


@dataclass(frozen=True)
class LevelProfile:
    """Configuration for each reading level."""

    level: ReadingLevel
    grade: str
    description: str
    max_sentence_length: int
    min_vocabulary_length: int  # words must be strictly longer than this
    difficulty: Difficulty


LEVEL_PROFILES: dict[ReadingLevel, LevelProfile] = {
    ReadingLevel.GRADE3: LevelProfile(
        level=ReadingLevel.GRADE3,
        grade="3rd grade",
        description="Simple sentences, common words",
        max_sentence_length=15,
        min_vocabulary_length=4,
        difficulty=Difficulty.BASIC,
    ),
    ReadingLevel.MIDDLE_SCHOOL: LevelProfile(
        level=ReadingLevel.MIDDLE_SCHOOL,
        grade="6th-8th grade",
        description="Clear explanations, moderate complexity",
        max_sentence_length=25,
        min_vocabulary_length=6,
        difficulty=Difficulty.INTERMEDIATE,
    ),
    ReadingLevel.HIGH_SCHOOL: LevelProfile(
        level=ReadingLevel.HIGH_SCHOOL,
        grade="9th-12th grade",
        description="More sophisticated language, complex concepts",
        max_sentence_length=35,
        min_vocabulary_length=8,
        difficulty=Difficulty.ADVANCED,
    ),
    ReadingLevel.COLLEGE: LevelProfile(
        level=ReadingLevel.COLLEGE,
        grade="College level",
        description="Academic language, specialized terms",
        max_sentence_length=50,
        min_vocabulary_length=10,
        difficulty=Difficulty.EXPERT,
    ),
}


def resolve_level(value: "ReadingLevel | str | None") -> ReadingLevel:
    """Map a caller-supplied level to a ReadingLevel.

    Missing or unrecognized values resolve to ``middle-school``.
    """
    if isinstance(value, ReadingLevel):
        return value
    if not isinstance(value, str):
        return DEFAULT_LEVEL
    try:
        return ReadingLevel(value)
    except ValueError:
        return DEFAULT_LEVEL


def get_profile(value: "ReadingLevel | str | None") -> LevelProfile:
    """Get the profile for a level, defaulting like :func:`resolve_level`."""
    return LEVEL_PROFILES[resolve_level(value)]
