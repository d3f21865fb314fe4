"""Rule-based simplification used when the generative provider is unavailable.

Three pieces, all driven by the static :class:`Lexicon`:

- ``ReadingLevelSimplifier``: whole-word, case-insensitive replacements applied
  in table order, then literal sentence-restructuring rules.
- ``VocabularyExtractor``: the first long words of the text, with canned or
  generic definitions.
- ``FallbackProcessor``: composes both into a ``SimplificationResult``.

Everything here is synchronous and free of shared mutable state.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Optional

from .levels import Difficulty, ReadingLevel, get_profile, resolve_level
from .lexicon import Lexicon, get_lexicon
from .types import Definition, RestructureRule, SimplificationResult, VocabularyEntry

logger = logging.getLogger(__name__)

MAX_VOCABULARY_ENTRIES = 5
SUMMARY_SENTENCES = 2

_NON_WORD_RE = re.compile(r"\W+", re.ASCII)
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")


class ReadingLevelSimplifier:
    """Apply a replacement table and a restructure ruleset to text."""

    def __init__(
        self,
        replacements: Mapping[str, str],
        rules: Iterable[RestructureRule] = (),
    ):
        # Compiled once; insertion order of the table is the application order
        self._patterns: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE | re.ASCII), simple)
            for word, simple in replacements.items()
        )
        self._rules = tuple(rules)

    @classmethod
    def for_level(
        cls, level: "ReadingLevel | str | None", lexicon: Optional[Lexicon] = None
    ) -> "ReadingLevelSimplifier":
        lexicon = lexicon or get_lexicon()
        return cls(lexicon.replacement_table(level), lexicon.restructure_rules(level))

    def replace_words(self, text: str) -> str:
        """Swap complex words for simpler ones."""
        result = text
        for pattern, simple in self._patterns:
            # table values are literals, not re templates
            result = pattern.sub(lambda _m, s=simple: s, result)
        return result

    def restructure(self, text: str) -> str:
        """Split sentences at punctuation and conjunctions."""
        result = text
        for rule in self._rules:
            result = result.replace(rule.pattern, rule.replacement)
        return result

    def simplify(self, text: str) -> str:
        return self.restructure(self.replace_words(text))


class VocabularyExtractor:
    """Pick long words from a text and explain them."""

    def __init__(
        self,
        definitions: Mapping[str, Definition],
        min_length: int,
        difficulty: Difficulty,
        limit: int = MAX_VOCABULARY_ENTRIES,
    ):
        self.definitions = definitions
        self.min_length = min_length
        self.difficulty = difficulty
        self.limit = limit

    @classmethod
    def for_level(
        cls, level: "ReadingLevel | str | None", lexicon: Optional[Lexicon] = None
    ) -> "VocabularyExtractor":
        lexicon = lexicon or get_lexicon()
        profile = get_profile(level)
        return cls(
            definitions=lexicon.definition_table(profile.level),
            min_length=profile.min_vocabulary_length,
            difficulty=profile.difficulty,
        )

    def candidate_words(self, text: str) -> list[str]:
        """Words longer than the threshold, in text order, repeats kept."""
        words: list[str] = []
        for token in text.split():
            word = _NON_WORD_RE.sub("", token)
            if len(word) > self.min_length:
                words.append(word)
                if len(words) == self.limit:
                    break
        return words

    def describe(self, word: str) -> VocabularyEntry:
        known = self.definitions.get(word.lower())
        if known is None:
            known = Definition(
                definition=f"Definition for {word}",
                example=f"Example sentence with {word}",
            )
        return VocabularyEntry(
            word=word,
            definition=known.definition,
            example=known.example,
            difficulty=self.difficulty,
        )

    def extract(self, text: str) -> list[VocabularyEntry]:
        return [self.describe(word) for word in self.candidate_words(text)]


def summarize_text(text: str, max_sentences: int = SUMMARY_SENTENCES) -> str:
    """Extractive summary: the leading sentences of the text."""
    sentences = [s.strip() for s in _SENTENCE_RE.findall(text) if s.strip()]
    return " ".join(sentences[:max_sentences])


class FallbackProcessor:
    """Compose the simplifier and extractor for one request."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def simplify(self, text: str, level: "ReadingLevel | str | None" = None) -> str:
        return ReadingLevelSimplifier.for_level(level, self.lexicon).simplify(text)

    def vocabulary(
        self, text: str, level: "ReadingLevel | str | None" = None
    ) -> list[VocabularyEntry]:
        return VocabularyExtractor.for_level(level, self.lexicon).extract(text)

    def process(
        self,
        text: str,
        level: "ReadingLevel | str | None" = None,
        include_summary: bool = False,
    ) -> SimplificationResult:
        resolved = resolve_level(level)
        simplified = self.simplify(text, resolved)
        vocabulary = self.vocabulary(text, resolved)
        logger.debug(
            "Rule-based simplification for %s: %d -> %d chars, %d words",
            resolved.value,
            len(text),
            len(simplified),
            len(vocabulary),
        )
        return SimplificationResult(
            simplified_text=simplified,
            vocabulary=vocabulary,
            summary=summarize_text(simplified) if include_summary else None,
            source="fallback",
        )


def simplify_text(
    text: str,
    level: "ReadingLevel | str | None" = None,
    lexicon: Optional[Lexicon] = None,
) -> str:
    """Simplify text for a reading level using the rule-based tables."""
    return FallbackProcessor(lexicon).simplify(text, level)


def extract_vocabulary(
    text: str,
    level: "ReadingLevel | str | None" = None,
    lexicon: Optional[Lexicon] = None,
) -> list[VocabularyEntry]:
    """Extract up to five vocabulary entries for a reading level."""
    return FallbackProcessor(lexicon).vocabulary(text, level)
