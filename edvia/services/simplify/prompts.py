"""Prompt templates for the generative provider."""

from .levels import LevelProfile

VOCABULARY_SCHEMA = """{
  "vocabulary": [
    {
      "word": "difficult word",
      "definition": "simple definition",
      "example": "example sentence",
      "difficulty": "basic|intermediate|advanced"
    }
  ]"""


def build_simplify_prompt(text: str, profile: LevelProfile, include_summary: bool) -> str:
    """Prompt asking for a simplified rewrite plus vocabulary (and summary)."""
    summary_field = (
        ',\n  "summary": "brief 2-3 sentence summary of the main points"'
        if include_summary
        else ""
    )
    schema = VOCABULARY_SCHEMA.replace(
        "{\n", '{\n  "simplifiedText": "simplified version of the text",\n', 1
    )
    return f"""You are an educational assistant that helps students understand complex text.
Your task is to simplify text to a {profile.grade} reading level ({profile.description}).

Guidelines:
- Use simple, clear language appropriate for {profile.grade} students
- Break down complex sentences into shorter ones (max {profile.max_sentence_length} words)
- Replace difficult words with simpler alternatives
- Maintain the original meaning and key concepts
- Use active voice when possible
- Provide clear explanations for important concepts

Please simplify this text for {profile.grade} students and extract key vocabulary:

"{text}"

Return a JSON object with this structure:
{schema}{summary_field}
}}"""


def build_vocabulary_prompt(text: str, profile: LevelProfile) -> str:
    """Prompt asking only for vocabulary."""
    return f"""You are an educational assistant that extracts and explains difficult vocabulary from text.
Provide clear, simple definitions that a {profile.grade} student would understand.

Extract the most important vocabulary words from this text and provide simple definitions:

"{text}"

Please return a JSON object with this structure:
{VOCABULARY_SCHEMA}
}}"""


def build_translation_prompt(
    text: str, language_key: str, language_name: str, reading_level: str
) -> str:
    """Prompt asking for a level-preserving translation."""
    return f"""You are a professional translator and educational assistant.
Your task is to translate text to {language_name} while maintaining the appropriate reading level ({reading_level}).

Guidelines:
- Provide accurate translation to {language_name}
- Maintain the same reading level complexity as the original
- Keep the meaning and context intact
- Use natural, fluent language in {language_name}
- If there are cultural references, adapt them appropriately for {language_name} speakers

Please translate this text to {language_name} while maintaining {reading_level} reading level:

"{text}"

Return a JSON object with this structure:
{{
  "originalText": "original text",
  "translatedText": "translated text in {language_name}",
  "targetLanguage": "{language_key}",
  "languageName": "{language_name}",
  "readingLevel": "{reading_level}"
}}"""
