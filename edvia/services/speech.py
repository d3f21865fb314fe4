"""Text preparation for browser text-to-speech."""

import re

_UNSPEAKABLE_RE = re.compile(r"[^A-Za-z0-9_\s.,!?;:'\"-]")
_WHITESPACE_RE = re.compile(r"\s+")


def prepare_for_tts(text: str) -> str:
    """Drop characters speech engines read aloud badly and normalize spacing."""
    cleaned = _UNSPEAKABLE_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()
