"""Word list files: streaming reads and stock list seeding."""

from collections.abc import Iterator
import os

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger

from orthopy.core.exceptions import SessionIOError
from orthopy.utils import ensure_parent_directory, expand_file_path, write_file_safely

STOCK_SOURCES = ["web2", "gcide"]


def iter_word_file(filepath: str) -> Iterator[str]:
    """Yield each line of a word list, trimmed, without loading the whole file.

    Raises:
        SessionIOError: If the file cannot be opened or decoded
    """
    filepath = expand_file_path(filepath) or filepath
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                yield line.strip()
    except FileNotFoundError as e:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise SessionIOError(f"Failed to read word list: {filepath}") from e
    except PermissionError as e:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise SessionIOError(f"Failed to read word list: {filepath}") from e
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise SessionIOError(f"Failed to read word list: {filepath}") from e


def ensure_word_file(filepath: str) -> None:
    """Create an empty word list if none exists yet."""
    if os.path.exists(filepath):
        return
    try:
        ensure_parent_directory(filepath)
        with open(filepath, "a", encoding="utf-8"):
            pass
    except OSError as e:
        logger.error(f"✗ Could not create word list {filepath}: {e}")
        raise SessionIOError(f"Failed to create word list: {filepath}") from e


def seed_stock_dictionary(filepath: str, overwrite: bool = False, verbose: bool = False) -> bool:
    """Write the english-words vocabulary to ``filepath`` as the stock word list.

    Only lowercase a-z entries are kept, one per line, sorted.

    Returns:
        True if the file was written, False if it already existed
    """
    if os.path.exists(filepath) and not overwrite:
        return False

    if verbose:
        logger.info("  Loading English words dictionary...")

    try:
        # type: ignore[no-any-return]
        words: set[str] = get_english_words_set(STOCK_SOURCES, alpha=True, lower=True)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load stock dictionary words") from e

    stock = sorted(w for w in words if w.isascii() and w.isalpha())

    def _write(f):
        for word in stock:
            f.write(word)
            f.write("\n")

    try:
        write_file_safely(filepath, _write, "writing stock dictionary")
    except OSError as e:
        raise SessionIOError(f"Failed to write stock dictionary: {filepath}") from e

    if verbose:
        logger.info(f"  Seeded {len(stock)} words into {filepath}")
    return True


def reset_user_dictionary(filepath: str) -> None:
    """Truncate the learned-words file."""
    try:
        write_file_safely(filepath, lambda f: None, "resetting user dictionary")
    except OSError as e:
        raise SessionIOError(f"Failed to reset user dictionary: {filepath}") from e
