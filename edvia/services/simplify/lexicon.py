"""Static lexicon driving the rule-based simplifier.

The replacement tables, restructure rules and canned definitions are data
(``data/lexicon.json``), loaded once and shared read-only. Table order in the
JSON file is significant: replacements are applied in insertion order.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ...core.exceptions import LexiconError
from .levels import ReadingLevel, resolve_level
from .types import Definition, RestructureRule

logger = logging.getLogger(__name__)

DEFAULT_LEXICON_PATH = Path(__file__).parent / "data" / "lexicon.json"


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of per-level tables."""

    replacements: Mapping[ReadingLevel, Mapping[str, str]]
    restructure: Mapping[ReadingLevel, tuple[RestructureRule, ...]]
    definitions: Mapping[ReadingLevel, Mapping[str, Definition]]

    def replacement_table(self, level: "ReadingLevel | str | None") -> Mapping[str, str]:
        """Word -> replacement mapping for a level (middle-school if unknown)."""
        return self.replacements[resolve_level(level)]

    def restructure_rules(
        self, level: "ReadingLevel | str | None"
    ) -> tuple[RestructureRule, ...]:
        """Sentence restructuring rules for a level."""
        return self.restructure.get(resolve_level(level), ())

    def definition_table(
        self, level: "ReadingLevel | str | None"
    ) -> Mapping[str, Definition]:
        """Canned definitions for a level."""
        return self.definitions.get(resolve_level(level), MappingProxyType({}))


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """json object hook that refuses silently overridden keys."""
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise LexiconError(f"duplicate key {key!r}")
        result[key] = value
    return result


def _parse_level(name: str) -> ReadingLevel:
    try:
        return ReadingLevel(name)
    except ValueError:
        raise LexiconError(f"unknown reading level {name!r}") from None


def _build_replacements(raw: dict[str, Any]) -> dict[ReadingLevel, Mapping[str, str]]:
    if not isinstance(raw, dict):
        raise LexiconError("'replacements' must be an object")
    tables: dict[ReadingLevel, Mapping[str, str]] = {}
    for name, table in raw.items():
        level = _parse_level(name)
        if not isinstance(table, dict):
            raise LexiconError(f"replacement table for {name} must be an object")
        for word, replacement in table.items():
            if word != word.lower():
                raise LexiconError(f"replacement key {word!r} must be lower case")
            if not isinstance(replacement, str):
                raise LexiconError(f"replacement for {word!r} must be a string")
        tables[level] = MappingProxyType(dict(table))

    missing = [level.value for level in ReadingLevel if level not in tables]
    if missing:
        raise LexiconError(f"missing replacement tables: {', '.join(missing)}")
    return tables


def _build_restructure(
    raw: dict[str, Any],
) -> dict[ReadingLevel, tuple[RestructureRule, ...]]:
    rulesets: dict[ReadingLevel, tuple[RestructureRule, ...]] = {}
    for name, rules in raw.items():
        level = _parse_level(name)
        try:
            rulesets[level] = tuple(
                RestructureRule(str(pattern), str(replacement))
                for pattern, replacement in rules
            )
        except (TypeError, ValueError):
            raise LexiconError(
                f"restructure rules for {name} must be [pattern, replacement] pairs"
            ) from None
    return rulesets


def _build_definitions(
    raw: dict[str, Any],
) -> dict[ReadingLevel, Mapping[str, Definition]]:
    tables: dict[ReadingLevel, Mapping[str, Definition]] = {}
    for name, entries in raw.items():
        level = _parse_level(name)
        if not isinstance(entries, dict):
            raise LexiconError(f"definition table for {name} must be an object")
        table: dict[str, Definition] = {}
        for word, entry in entries.items():
            if word.lower() in table:
                raise LexiconError(
                    f"duplicate definition for {word.lower()!r} in {name}"
                )
            try:
                table[word.lower()] = Definition(
                    definition=entry["definition"], example=entry["example"]
                )
            except (KeyError, TypeError):
                raise LexiconError(
                    f"definition for {word!r} needs 'definition' and 'example'"
                ) from None
        tables[level] = MappingProxyType(table)
    return tables


def parse_lexicon(text: str) -> Lexicon:
    """Build a Lexicon from JSON text."""
    try:
        raw = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise LexiconError(f"invalid JSON: {e}") from e

    if not isinstance(raw, dict) or "replacements" not in raw:
        raise LexiconError("lexicon must be an object with a 'replacements' table")

    return Lexicon(
        replacements=MappingProxyType(_build_replacements(raw["replacements"])),
        restructure=MappingProxyType(_build_restructure(raw.get("restructure", {}))),
        definitions=MappingProxyType(_build_definitions(raw.get("definitions", {}))),
    )


def load_lexicon(path: Optional[Path] = None) -> Lexicon:
    """Load a lexicon file (defaults to the packaged one)."""
    lexicon_path = path or DEFAULT_LEXICON_PATH
    try:
        text = lexicon_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LexiconError(f"cannot read {lexicon_path}: {e}") from e

    lexicon = parse_lexicon(text)
    logger.info(
        "Loaded lexicon from %s (%d replacement entries)",
        lexicon_path,
        sum(len(table) for table in lexicon.replacements.values()),
    )
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    """Get the process-wide lexicon, honouring settings.LEXICON_PATH."""
    from ...core.config import settings

    return load_lexicon(settings.lexicon_path)
