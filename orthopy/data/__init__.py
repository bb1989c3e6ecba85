"""Data loading and management for OrthoPy."""

from orthopy.data.dictionary import Dictionary
from orthopy.data.wordlists import (
    ensure_word_file,
    iter_word_file,
    reset_user_dictionary,
    seed_stock_dictionary,
)

__all__ = [
    "Dictionary",
    "ensure_word_file",
    "iter_word_file",
    "reset_user_dictionary",
    "seed_stock_dictionary",
]
