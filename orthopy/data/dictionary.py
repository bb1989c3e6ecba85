"""Trie-backed dictionary with a persisted store of learned words."""

from __future__ import annotations

from typing import TextIO

from loguru import logger
from tqdm import tqdm

from orthopy.core.exceptions import SessionIOError
from orthopy.core.trie import Trie
from orthopy.data.wordlists import ensure_word_file, iter_word_file


def _is_trie_word(word: str) -> bool:
    return word.isascii() and word.isalpha() and word.islower()


class Dictionary:
    """Word store for one session.

    Loads a stock list and a user list into a Trie, and appends words learned
    during the session to the user list. The enumeration of all words is
    cached and dropped whenever a word is added.
    """

    def __init__(self, stock_path: str, user_path: str, verbose: bool = False) -> None:
        self.trie = Trie()
        self.stock_path = stock_path
        self.user_path = user_path
        self.verbose = verbose
        self._all_words: list[str] | None = None
        self._writer: TextIO | None = None

        ensure_word_file(user_path)
        self.load(stock_path, user_path)

        try:
            self._writer = open(user_path, "a", encoding="utf-8")
        except OSError as e:
            logger.error(f"✗ Could not open user dictionary for writing: {user_path}: {e}")
            raise SessionIOError(f"Failed to open user dictionary: {user_path}") from e

    def load(self, *sources: str) -> int:
        """Insert every word of each source file.

        Blank and duplicate lines are harmless. Entries with characters other
        than letters are skipped.

        Returns:
            Number of lines inserted
        """
        inserted = 0
        for source in sources:
            skipped = 0
            lines = iter_word_file(source)
            if self.verbose:
                lines = tqdm(lines, desc=f"Loading {source}", unit="word")
            for line in lines:
                if not line:
                    continue
                word = line.lower()
                if not _is_trie_word(word):
                    skipped += 1
                    continue
                self.trie.insert(word)
                inserted += 1
            if skipped:
                logger.info(f"  Skipped {skipped} entries with invalid characters in {source}")

        self._all_words = None
        if self.verbose:
            logger.info(f"  Dictionary holds {len(self.trie)} words")
        return inserted

    def add_word(self, word: str) -> bool:
        """Learn a new word and persist it to the user dictionary.

        Returns:
            False if the word is empty, has a non-letter character or is
            already known; True once it has been inserted and saved
        """
        if not word or not (word.isascii() and word.isalpha()):
            return False

        lowered = word.lower()
        if self.trie.search(lowered):
            return False

        self.trie.insert(lowered)
        self._save_to_user_dictionary(lowered)
        self._all_words = None
        logger.debug(f"Added {lowered!r} to user dictionary")
        return True

    def contains(self, word: str) -> bool:
        return self.trie.search(word)

    def all_words(self) -> list[str]:
        """Every known word in lexicographic order."""
        if self._all_words is None:
            self._all_words = self.trie.enumerate()
        return self._all_words

    def _save_to_user_dictionary(self, word: str) -> None:
        if self._writer is None:
            raise SessionIOError(f"User dictionary is closed: {self.user_path}")
        try:
            self._writer.write(word + "\n")
            self._writer.flush()
        except OSError as e:
            logger.error(f"✗ Could not save {word!r} to {self.user_path}: {e}")
            raise SessionIOError(f"Failed to write user dictionary: {self.user_path}") from e

    def close(self) -> None:
        """Flush and close the user dictionary handle."""
        if self._writer is None:
            return
        try:
            self._writer.close()
        except OSError as e:
            logger.error(f"✗ Error closing user dictionary {self.user_path}: {e}")
            raise SessionIOError(f"Failed to close user dictionary: {self.user_path}") from e
        finally:
            self._writer = None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.trie.search(word)

    def __len__(self) -> int:
        return len(self.trie)

    def __enter__(self) -> Dictionary:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
