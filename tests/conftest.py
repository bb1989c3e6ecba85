"""Shared fixtures: small word lists, dictionaries and scanners on tmp_path."""

import pytest

from orthopy.checking import SpellChecker
from orthopy.data import Dictionary
from orthopy.document import DocumentScanner

STOCK_WORDS = [
    "a",
    "app",
    "apple",
    "banana",
    "car",
    "cat",
    "goodbye",
    "hello",
    "is",
    "line",
    "second",
    "test",
    "the",
    "this",
    "world",
]


@pytest.fixture
def stock_file(tmp_path):
    path = tmp_path / "words_alpha.txt"
    path.write_text("\n".join(STOCK_WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def user_file(tmp_path):
    return tmp_path / "user_dictionary.txt"


@pytest.fixture
def dictionary(stock_file, user_file):
    with Dictionary(str(stock_file), str(user_file)) as d:
        yield d


@pytest.fixture
def checker(dictionary):
    return SpellChecker(dictionary)


@pytest.fixture
def make_scanner(tmp_path, checker):
    """Write ``text`` to a document and open a scanner over it."""
    scanners = []

    def _make(text: str, name: str = "document.txt", suggestion_count: int = 3):
        document = tmp_path / name
        document.write_text(text, encoding="utf-8")
        scanner = DocumentScanner(
            str(document), checker, str(tmp_path / "staging" / "temp_output.txt"), suggestion_count
        )
        scanners.append(scanner)
        return scanner

    yield _make

    for scanner in scanners:
        scanner.close()
