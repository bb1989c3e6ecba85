"""Whitespace-preserving tokenization of document lines."""

import re

TERMINAL_PUNCTUATION = (".", "!", "?")

_TOKEN_PATTERN = re.compile(r"\s+|\S+")
_MARKUP_PREFIXES = ("<!DOCTYPE html", "<?xml")


def tokenize(line: str) -> list[str]:
    """Split a line into alternating whitespace and non-whitespace runs.

    Joining the result gives back the line exactly.
    """
    return _TOKEN_PATTERN.findall(line)


def is_whitespace(token: str) -> bool:
    return token.isspace()


def has_end_punct(token: str) -> bool:
    """True if the token ends a sentence (commas and quotes do not count)."""
    return token.endswith(TERMINAL_PUNCTUATION)


def split_end_punct(token: str) -> tuple[str, str]:
    """Separate one trailing terminal mark: "word." -> ("word", ".")."""
    if has_end_punct(token):
        return token[:-1], token[-1]
    return token, ""


def capitalize_first(token: str) -> str:
    return token[:1].upper() + token[1:]


def is_markup_document(line: str) -> bool:
    """Detect HTML/XML documents, which are not spell-checked."""
    return line.strip().startswith(_MARKUP_PREFIXES)
