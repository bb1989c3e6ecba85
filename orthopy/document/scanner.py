"""Document scanning session.

A DocumentScanner reads a document line by line, pauses on the first problem
it finds, and resumes after the caller picks a corrective operation. Lines
that are done are flushed to a staged output file, which is finally moved to
the caller's chosen path or destroyed.

The scan position is the pair (``context``, ``token_index``): the line being
checked and the token the next scan starts from. Tokens come from
``tokenize`` so whitespace runs are tokens too, and the word before the
current one is always two tokens back.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO

from loguru import logger

from orthopy.checking.spellchecker import SpellChecker
from orthopy.core.config import DEFAULT_SUGGESTION_COUNT
from orthopy.core.exceptions import SessionIOError
from orthopy.core.types import Command, ErrorKind, ErrorRecord, ScanState
from orthopy.document.edits import delete_token, replace_matching, replace_token, splice_token
from orthopy.document.output import StagedOutput, with_extension
from orthopy.document.statistics import SessionStatistics
from orthopy.document.tokenizer import (
    has_end_punct,
    is_markup_document,
    is_whitespace,
    split_end_punct,
    tokenize,
)


class DocumentScanner:
    """Interactive spell-check of one document."""

    def __init__(
        self,
        input_path: str,
        checker: SpellChecker,
        staging_path: str,
        suggestion_count: int = DEFAULT_SUGGESTION_COUNT,
    ) -> None:
        self.input_path = input_path
        self.checker = checker
        self.suggestion_count = suggestion_count

        self.state = ScanState.SCANNING
        self.context: str | None = None
        self.token_index = 0
        self.current_error: ErrorRecord | None = None
        self.replace_all_words: dict[str, str] = {}
        self.output_path: str | None = None

        self._reader: TextIO | None = None
        self._lines_read = 0
        self._stopped = False
        self._finalized = False

        try:
            total_bytes = os.path.getsize(input_path)
            self._reader = open(input_path, "r", encoding="utf-8")
        except OSError as e:
            logger.error(f"✗ Could not open document {input_path}: {e}")
            raise SessionIOError(f"Failed to open document: {input_path}") from e

        self.statistics = SessionStatistics(total_bytes=total_bytes)

        try:
            self.output = StagedOutput(staging_path)
        except SessionIOError:
            self._close_reader()
            raise

        self.context = self._read_line()
        if self.context is None:
            self._complete()

    # ------------------------------------------------------------------
    # Scanning

    @property
    def progress(self) -> float:
        return self.statistics.progress

    def error_count(self, kind: ErrorKind) -> int:
        return self.statistics.error_count(kind)

    def start(self) -> ErrorRecord | None:
        """Scan from the beginning of the first line."""
        if self.context is None:
            self._complete()
            return None
        return self.scan(self.context, 0)

    def scan(self, line: str, from_index: int = 0) -> ErrorRecord | None:
        """Check ``line`` from a token index onwards, then the rest of the document.

        Returns the first problem found, or None once the document is done.
        """
        self.context = line
        index = from_index
        while True:
            record = self._find_error(tokenize(self.context), index)
            if record is not None:
                return self._pause(record)

            self._commit_line(self.context)
            next_line = self._read_line()
            if next_line is None:
                self._complete()
                return None
            self.context = self._apply_replace_all(next_line)
            self.token_index = index = 0

    def _find_error(self, tokens: list[str], start: int) -> ErrorRecord | None:
        for index in range(start, len(tokens)):
            self.token_index = index
            token = tokens[index]
            if is_whitespace(token):
                continue
            kind = self._classify(tokens, index)
            if kind is not None:
                return ErrorRecord(
                    word=token,
                    kind=kind,
                    suggestions=self._suggest(token),
                    token_index=index,
                )
        return None

    def _classify(self, tokens: list[str], index: int) -> ErrorKind | None:
        """Apply the checks in priority order; the first failing one wins."""
        token = tokens[index]

        if (index + 2 < len(tokens) and tokens[index + 2] == token) or (
            index >= 2 and tokens[index - 2] == token
        ):
            return ErrorKind.DOUBLE_WORD

        previous = tokens[index - 2] if index >= 2 else None
        bare = self.checker.remove_tags(token)

        if previous is not None and has_end_punct(previous):
            if not self.checker.is_acronym(bare) and not self.checker.check_capitalization(bare):
                return ErrorKind.CAPITALIZATION
        elif previous is not None and not is_whitespace(previous):
            if not self.checker.is_acronym(bare) and self.checker.check_capitalization(bare):
                return ErrorKind.MISCAPITALIZATION

        # Only one trailing . ! or ? is dropped; commas and quotes stay on the word
        word, _ = split_end_punct(token)
        if not self.checker.is_valid_word(word):
            return ErrorKind.SPELLING

        return None

    def _suggest(self, token: str) -> list[str]:
        word, _ = split_end_punct(token)
        return self.checker.get_suggestions(word.lower(), self.suggestion_count)

    def _pause(self, record: ErrorRecord) -> ErrorRecord:
        self.current_error = record
        self.token_index = record.token_index
        self.state = ScanState.ERROR_PENDING
        self.statistics.record_error(record.kind)
        logger.debug(f"{record.kind.name}: {record.word!r} at token {record.token_index}")
        return record

    def _complete(self) -> None:
        if self.state is not ScanState.COMPLETE:
            logger.info("Spell-checking complete")
        self.current_error = None
        self.state = ScanState.COMPLETE
        self.statistics.complete()

    def _commit_line(self, line: str) -> None:
        self.output.write_line(line)
        words = sum(1 for token in tokenize(line) if not is_whitespace(token))
        self.statistics.record_line(line, words)

    def _read_line(self) -> str | None:
        if self._reader is None:
            return None
        try:
            line = self._reader.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"✗ Error reading document {self.input_path}: {e}")
            raise SessionIOError(f"Failed to read document: {self.input_path}") from e

        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]

        self._lines_read += 1
        if self._lines_read == 1 and is_markup_document(line):
            logger.warning(f"HTML or XML document detected in {self.input_path}; not checked")
            self._close_reader()
            return None
        return line

    def _apply_replace_all(self, line: str) -> str:
        if not self.replace_all_words:
            return line
        return "".join(self.replace_all_words.get(token, token) for token in tokenize(line))

    # ------------------------------------------------------------------
    # Corrective operations

    def _cursor_tokens(self) -> list[str] | None:
        """Tokens of the current line, or None when there is nothing to act on."""
        if self._stopped or self._finalized or self.context is None:
            logger.warning("No line to correct: the session has ended")
            return None
        if self.state is not ScanState.ERROR_PENDING or self.current_error is None:
            logger.warning("No error is pending; nothing to correct")
            return None
        tokens = tokenize(self.context)
        if not 0 <= self.token_index < len(tokens):
            logger.warning(f"Token index {self.token_index} is outside the current line")
            return None
        return tokens

    def _resume(self, tokens: list[str], index: int) -> ErrorRecord | None:
        self.current_error = None
        self.state = ScanState.SCANNING
        return self.scan("".join(tokens), index)

    def replace(self, target: str) -> ErrorRecord | None:
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        index = self.token_index
        return self._resume(replace_token(tokens, index, target), index + 1)

    def replace_all(self, target: str) -> ErrorRecord | None:
        """Replace this token here and wherever it appears later in the document."""
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        index = self.token_index
        original = tokens[index]
        replacement = replace_token(tokens, index, target)[index]
        self.replace_all_words[original] = replacement
        return self._resume(replace_matching(tokens, original, replacement), index + 1)

    def ignore_once(self) -> ErrorRecord | None:
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        return self._resume(tokens, self.token_index + 1)

    def ignore_all(self) -> ErrorRecord | None:
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        word, _ = split_end_punct(tokens[self.token_index])
        self.checker.ignore_all(word)
        return self._resume(tokens, self.token_index + 1)

    def delete(self) -> ErrorRecord | None:
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        index = self.token_index
        return self._resume(delete_token(tokens, index), index)

    def manual_edit(self, text: str) -> ErrorRecord | None:
        """Splice user text in verbatim and check it like any other text."""
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        index = self.token_index
        return self._resume(splice_token(tokens, index, text), index)

    def add_to_dictionary(self) -> ErrorRecord | None:
        tokens = self._cursor_tokens()
        if tokens is None:
            return self.current_error
        word, _ = split_end_punct(tokens[self.token_index])
        if not self.checker.add_to_dictionary(word):
            logger.warning(f"Could not add {word!r} to the dictionary")
        return self._resume(tokens, self.token_index + 1)

    def premature_exit(self) -> None:
        """Write the current line as it stands and stop scanning."""
        if self._finalized:
            logger.warning("Session already finalized")
            return
        if self.state is not ScanState.COMPLETE and self.context is not None:
            self._commit_line(self.context)
        self._stopped = True
        self._close_reader()
        self._complete()

    def exit(self, destination: str) -> str | None:
        """Close the session and move the staged output to ``destination``.

        The input's extension is appended when missing, and ``+copy`` is added
        to the name for every existing file in the way.

        Returns:
            The final path, or None if the session was already finalized

        Raises:
            SessionIOError: If the file cannot be moved
        """
        if self._finalized:
            logger.warning("Session already finalized; nothing to export")
            return None
        self._finalized = True
        self._close_reader()
        extension = Path(self.input_path).suffix
        self.output_path = self.output.move_to(with_extension(destination, extension))
        return self.output_path

    def destroy_file(self) -> None:
        """Close the session and delete the staged output."""
        if self._finalized:
            logger.warning("Session already finalized; nothing to destroy")
            return
        self._finalized = True
        self._close_reader()
        self.output.destroy()

    def close(self) -> None:
        """Release file handles without exporting."""
        self._close_reader()
        self.output.close()

    def _close_reader(self) -> None:
        if self._reader is None:
            return
        try:
            self._reader.close()
        finally:
            self._reader = None

    # ------------------------------------------------------------------
    # Operation protocol

    def handle_command(self, command: str) -> bool:
        """Run one protocol command such as ``replace:word`` or ``ignore``.

        Returns:
            False if the command keyword is not recognized, True otherwise
        """
        logger.debug(f"Command: {command!r}")

        if command.startswith(Command.REPLACE):
            self.replace(command[len(Command.REPLACE) :])
        elif command.startswith(Command.REPLACE_ALL):
            self.replace_all(command[len(Command.REPLACE_ALL) :])
        elif command == Command.IGNORE:
            self.ignore_once()
        elif command == Command.IGNORE_ALL:
            self.ignore_all()
        elif command == Command.DELETE:
            self.delete()
        elif command.startswith(Command.MANUAL_EDIT):
            self.manual_edit(command[len(Command.MANUAL_EDIT) :])
        elif command == Command.ADD_TO_DICT:
            self.add_to_dictionary()
        elif command == Command.PREMATURE_EXIT:
            self.premature_exit()
        elif command.startswith(Command.EXIT):
            self.exit(command[len(Command.EXIT) :])
        elif command == Command.DESTROY_FILE:
            self.destroy_file()
        else:
            logger.warning(f"Unrecognized command: {command!r}")
            return False
        return True
