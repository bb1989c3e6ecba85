"""Type definitions for OrthoPy."""

from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(Enum):
    """Kind of problem found while scanning a token."""

    SPELLING = "spelling"
    CAPITALIZATION = "capitalization"  # Sentence start not capitalized
    MISCAPITALIZATION = "miscapitalization"  # Capitalized mid-sentence
    DOUBLE_WORD = "double_word"


class ScanState(Enum):
    """Lifecycle of a document scanning session."""

    SCANNING = "scanning"
    ERROR_PENDING = "error_pending"
    COMPLETE = "complete"


@dataclass
class ErrorRecord:
    """A flagged token awaiting a corrective operation."""

    word: str
    kind: ErrorKind
    suggestions: list[str] = field(default_factory=list)
    token_index: int = 0


class Command:
    """Keywords of the operation protocol understood by the scanner."""

    REPLACE = "replace:"
    REPLACE_ALL = "replace-all:"
    IGNORE = "ignore"
    IGNORE_ALL = "ignore-all"
    DELETE = "delete"
    MANUAL_EDIT = "manual-edit:"
    ADD_TO_DICT = "add-to-dict"
    PREMATURE_EXIT = "premature-exit"
    EXIT = "exit:"
    DESTROY_FILE = "destroy-file"
