"""Token-list rewrites behind the corrective operations.

Every function returns a new list and leaves its input untouched.
"""

from orthopy.document.tokenizer import (
    capitalize_first,
    has_end_punct,
    is_whitespace,
    split_end_punct,
)


def replace_token(tokens: list[str], index: int, target: str) -> list[str]:
    """Put ``target`` in place of a token, keeping its sentence-ending mark."""
    _, punct = split_end_punct(tokens[index])
    return splice_token(tokens, index, target + punct)


def splice_token(tokens: list[str], index: int, text: str) -> list[str]:
    """Put ``text`` verbatim in place of a token."""
    updated = list(tokens)
    updated[index] = text
    return updated


def replace_matching(tokens: list[str], original: str, replacement: str) -> list[str]:
    """Rewrite every token equal to ``original`` (exact, case-sensitive)."""
    return [replacement if token == original else token for token in tokens]


def delete_token(tokens: list[str], index: int) -> list[str]:
    """Remove a word and one adjacent whitespace run, repairing punctuation.

    - Last word: the whitespace before it goes too, and its end mark moves
      onto the word that is now last.
    - Middle word: the whitespace after it goes too. An end mark it carried
      moves onto the preceding word and the following word is capitalized.
      The following word is also capitalized when the preceding word already
      ended a sentence.
    - Only word: the line becomes empty, including any whitespace before
      the word and its end mark.
    """
    if len(tokens) <= 1:
        return []

    token = tokens[index]
    if is_whitespace(token):
        return tokens[:index] + tokens[index + 1 :]

    _, punct = split_end_punct(token)

    if index == len(tokens) - 1:
        cut = index - 1 if index > 0 and is_whitespace(tokens[index - 1]) else index
        updated = tokens[:cut]
        if punct and updated and not is_whitespace(updated[-1]):
            updated[-1] += punct
        return updated

    after = index + 2 if is_whitespace(tokens[index + 1]) else index + 1
    updated = tokens[:index] + tokens[after:]

    preceding = index - 2 if index >= 2 and not is_whitespace(updated[index - 2]) else None
    following = index if index < len(updated) and not is_whitespace(updated[index]) else None

    if punct and preceding is not None:
        updated[preceding] += punct

    starts_sentence = punct or (preceding is not None and has_end_punct(updated[preceding]))
    if starts_sentence and following is not None:
        updated[following] = capitalize_first(updated[following])

    return updated
