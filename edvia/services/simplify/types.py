"""Value types produced by the simplification services."""

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional

from .levels import Difficulty


class RestructureRule(NamedTuple):
    """Literal substring substitution used to shorten sentences."""

    pattern: str
    replacement: str


class Definition(NamedTuple):
    """Canned definition and example sentence for a word."""

    definition: str
    example: str


@dataclass(frozen=True)
class VocabularyEntry:
    """A single extracted difficult word."""

    word: str
    definition: str
    example: str
    difficulty: Difficulty

    def to_dict(self) -> dict[str, str]:
        return {
            "word": self.word,
            "definition": self.definition,
            "example": self.example,
            "difficulty": self.difficulty.value,
        }


@dataclass
class SimplificationResult:
    """Result of processing one request."""

    simplified_text: str
    vocabulary: list[VocabularyEntry] = field(default_factory=list)
    summary: Optional[str] = None
    source: str = "fallback"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "simplifiedText": self.simplified_text,
            "vocabulary": [entry.to_dict() for entry in self.vocabulary],
        }
        if self.summary is not None:
            data["summary"] = self.summary
        return data
