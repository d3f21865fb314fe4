"""Reading-level text simplification and vocabulary extraction."""
from .levels import (
    DEFAULT_LEVEL,
    LEVEL_PROFILES,
    Difficulty,
    LevelProfile,
    ReadingLevel,
    get_profile,
    resolve_level,
)
from .lexicon import Lexicon, get_lexicon, load_lexicon, parse_lexicon
from .rule_based import (
    FallbackProcessor,
    ReadingLevelSimplifier,
    VocabularyExtractor,
    extract_vocabulary,
    simplify_text,
    summarize_text,
)
from .service import TextProcessingService, normalize_vocabulary
from .types import Definition, RestructureRule, SimplificationResult, VocabularyEntry

__all__ = [
    'DEFAULT_LEVEL',
    'LEVEL_PROFILES',
    'Definition',
    'Difficulty',
    'FallbackProcessor',
    'LevelProfile',
    'Lexicon',
    'ReadingLevel',
    'ReadingLevelSimplifier',
    'RestructureRule',
    'SimplificationResult',
    'TextProcessingService',
    'VocabularyEntry',
    'VocabularyExtractor',
    'extract_vocabulary',
    'get_lexicon',
    'get_profile',
    'load_lexicon',
    'normalize_vocabulary',
    'parse_lexicon',
    'resolve_level',
    'simplify_text',
    'summarize_text',
]
