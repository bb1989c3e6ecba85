"""OrthoPy - Interactive spell-checker for plain text documents.

Flags misspelled, miscapitalized and doubled words one at a time and applies
the correction the user picks.
"""

from orthopy.checking import SpellChecker
from orthopy.core import Config, ErrorKind, ErrorRecord, ScanState, Trie, load_config
from orthopy.data import Dictionary
from orthopy.document import DocumentScanner
from orthopy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Dictionary",
    "DocumentScanner",
    "ErrorKind",
    "ErrorRecord",
    "ScanState",
    "SpellChecker",
    "Trie",
    "load_config",
    "setup_logger",
]
