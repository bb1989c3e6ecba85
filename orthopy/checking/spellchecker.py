"""Word validity, capitalization rules and suggestions."""

import re

from loguru import logger

from orthopy.checking.ranking import TopK
from orthopy.core.config import DEFAULT_SUGGESTION_COUNT
from orthopy.core.distance import edit_distance
from orthopy.data.dictionary import Dictionary

_TAG_PATTERN = re.compile(r"(<\w+( \w+)*>|</\w*>)| ")
_NUMERIC_PATTERN = re.compile(r"[0-9]+")


class SpellChecker:
    """Checks words against a Dictionary for one session.

    The ignore set lives as long as this checker; it is never persisted.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary
        self.ignored_words: set[str] = set()

    def is_acronym(self, word: str | None) -> bool:
        """All-uppercase words longer than one letter, plus the pronoun "I"."""
        if word is None or word != word.upper():
            return False
        return len(word) > 1 or word == "I"

    def check_capitalization(self, word: str | None) -> bool:
        """True for acronyms and for words like "Word" (capital then lowercase)."""
        if not word:
            return False
        if self.is_acronym(word):
            return True
        rest = word[1:]
        return word[0].isupper() and rest == rest.lower()

    def is_valid_word(self, word: str | None) -> bool:
        """Check a word against the ignore set, acronym rule and dictionary.

        Hyphens are dropped before the dictionary lookup, so "e-mail" matches
        "email". Digits-only tokens are not treated as acronyms.
        """
        if not word:
            return False
        if self.is_ignored(word):
            return True
        if self.is_acronym(word) and not _NUMERIC_PATTERN.fullmatch(word):
            return True
        return self.dictionary.contains(word.replace("-", "").lower())

    def ignore_all(self, word: str) -> bool:
        self.ignored_words.add(word)
        return True

    def is_ignored(self, word: str) -> bool:
        return word in self.ignored_words

    def add_to_dictionary(self, word: str) -> bool:
        return self.dictionary.add_word(word)

    @staticmethod
    def remove_tags(word: str) -> str:
        """Strip markup tags such as <b> or </i> and spaces from a token."""
        return _TAG_PATTERN.sub("", word)

    def get_suggestions(self, word: str, k: int = DEFAULT_SUGGESTION_COUNT) -> list[str]:
        """Return the ``k`` dictionary words nearest to ``word``.

        Every dictionary word is compared. Ties on distance are broken
        alphabetically. A dictionary smaller than ``k`` yields all its words.
        """
        best = TopK(k)
        length = len(word)
        for candidate in self.dictionary.all_words():
            worst = best.worst() if best.full else None
            if worst is None:
                best.offer(edit_distance(word, candidate), candidate)
                continue
            # The length gap is a lower bound of the distance
            if abs(len(candidate) - length) > worst.distance:
                continue
            best.offer(edit_distance(word, candidate, worst.distance), candidate)

        suggestions = [c.word for c in best.ranked()]
        logger.debug(f"Suggestions for {word!r}: {suggestions}")
        return suggestions
