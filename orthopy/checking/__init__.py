"""Spell checking rules and suggestion ranking."""

from orthopy.checking.ranking import Candidate, TopK
from orthopy.checking.spellchecker import DEFAULT_SUGGESTION_COUNT, SpellChecker

__all__ = [
    "Candidate",
    "DEFAULT_SUGGESTION_COUNT",
    "SpellChecker",
    "TopK",
]
