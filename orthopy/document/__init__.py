"""Document scanning, corrections and staged output."""

from orthopy.document.output import StagedOutput
from orthopy.document.scanner import DocumentScanner
from orthopy.document.statistics import SessionStatistics
from orthopy.document.tokenizer import tokenize

__all__ = [
    "DocumentScanner",
    "SessionStatistics",
    "StagedOutput",
    "tokenize",
]
