"""Core domain logic for OrthoPy."""

from .config import Config, load_config
from .distance import edit_distance
from .exceptions import SessionIOError
from .trie import Trie, TrieNode
from .types import Command, ErrorKind, ErrorRecord, ScanState

__all__ = [
    "Command",
    "Config",
    "ErrorKind",
    "ErrorRecord",
    "ScanState",
    "SessionIOError",
    "Trie",
    "TrieNode",
    "edit_distance",
    "load_config",
]
