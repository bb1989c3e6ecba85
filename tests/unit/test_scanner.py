"""Unit tests for the document scanning state machine.

Tests verify error detection, each corrective operation and session
finalization. Each test has a single assertion and focuses on behavior.
"""

import pytest

from orthopy.core import Command, ErrorKind, ScanState, SessionIOError
from orthopy.document import DocumentScanner


def _staged(tmp_path):
    return (tmp_path / "staging" / "temp_output.txt").read_text(encoding="utf-8")


class TestErrorDetection:
    """Test which problem is reported for a line."""

    def test_clean_line_completes(self, make_scanner) -> None:
        """A line without problems runs the scan to completion."""
        scanner = make_scanner("Hello world")
        scanner.start()
        assert scanner.state is ScanState.COMPLETE

    def test_flags_misspelling(self, make_scanner) -> None:
        """Unknown words are SPELLING errors."""
        record = make_scanner("Hello wrld").start()
        assert record.kind is ErrorKind.SPELLING

    def test_error_points_at_token(self, make_scanner) -> None:
        """The record carries the index of the flagged token."""
        record = make_scanner("Hello wrld").start()
        assert record.token_index == 2

    def test_error_carries_suggestions(self, make_scanner) -> None:
        """Suggestions for the flagged word come with the record."""
        record = make_scanner("Hello wrld").start()
        assert record.suggestions[0] == "world"

    def test_suggestions_ignore_sentence_end(self, make_scanner) -> None:
        """A terminal mark is not part of the suggestion query."""
        record = make_scanner("Hello wrld.").start()
        assert record.suggestions[0] == "world"

    def test_flags_capital_mid_sentence(self, make_scanner) -> None:
        """A capitalized word after a plain word is MISCAPITALIZATION."""
        record = make_scanner("Hello World").start()
        assert record.kind is ErrorKind.MISCAPITALIZATION

    def test_flags_lowercase_sentence_start(self, make_scanner) -> None:
        """A lowercase word after a sentence end is CAPITALIZATION."""
        record = make_scanner("Hello. world").start()
        assert record.kind is ErrorKind.CAPITALIZATION

    def test_flags_repeated_word(self, make_scanner) -> None:
        """A word equal to its neighbour is DOUBLE_WORD."""
        record = make_scanner("Hello Hello world").start()
        assert (record.kind, record.token_index) == (ErrorKind.DOUBLE_WORD, 0)

    def test_capital_before_repeat_is_reported_first(self, make_scanner) -> None:
        """In "Hello World Hello World" no neighbours match; "World" is miscapitalized."""
        record = make_scanner("Hello World Hello World").start()
        assert (record.kind, record.token_index) == (ErrorKind.MISCAPITALIZATION, 2)

    def test_acronym_mid_sentence_is_accepted(self, make_scanner) -> None:
        """Acronyms are neither miscapitalized nor misspelled."""
        scanner = make_scanner("hello NASA")
        assert scanner.start() is None

    def test_number_is_flagged_as_spelling(self, make_scanner) -> None:
        """Digits-only tokens are not dictionary words."""
        record = make_scanner("the 42").start()
        assert record.kind is ErrorKind.SPELLING

    def test_pauses_in_error_pending(self, make_scanner) -> None:
        """Finding a problem moves the scanner to ERROR_PENDING."""
        scanner = make_scanner("Hello wrld")
        scanner.start()
        assert scanner.state is ScanState.ERROR_PENDING

    def test_counts_errors_by_kind(self, make_scanner) -> None:
        """Each reported problem is counted."""
        scanner = make_scanner("Hello wrld")
        scanner.start()
        assert scanner.error_count(ErrorKind.SPELLING) == 1


class TestDocumentLifecycle:
    """Test line handling, markup detection and progress."""

    def test_empty_document_is_complete(self, make_scanner) -> None:
        """Nothing to read means nothing to check."""
        assert make_scanner("").state is ScanState.COMPLETE

    def test_markup_document_is_not_checked(self, make_scanner) -> None:
        """HTML documents end the session without any error."""
        scanner = make_scanner("<!DOCTYPE html>\n<p>helo</p>\n", name="page.html")
        assert scanner.start() is None

    def test_halts_before_reading_past_error(self, make_scanner) -> None:
        """Only lines before the flagged one have been written."""
        scanner = make_scanner("Hello world\nHello wrld\nthe cat\n")
        scanner.start()
        assert scanner.statistics.line_count == 1

    def test_clean_lines_are_staged_verbatim(self, make_scanner, tmp_path) -> None:
        """Lines without problems reach the staging file unchanged."""
        make_scanner("Hello  world\nthe cat\n").start()
        assert _staged(tmp_path) == "Hello  world\nthe cat\n"

    def test_progress_reaches_hundred(self, make_scanner) -> None:
        """A completed scan reports 100% progress."""
        scanner = make_scanner("Hello world\n")
        scanner.start()
        assert scanner.progress == 100.0

    def test_missing_document_raises(self, tmp_path, checker) -> None:
        """An unreadable document is a session I/O error."""
        with pytest.raises(SessionIOError, match="Failed to open document"):
            DocumentScanner(str(tmp_path / "missing.txt"), checker, str(tmp_path / "stage.txt"))


class TestCorrectiveOperations:
    """Test each operation applied to the pending error."""

    def test_replace_rewrites_token(self, make_scanner) -> None:
        """The flagged word is replaced in the current line."""
        scanner = make_scanner("Helo World")
        scanner.start()
        scanner.replace("Goodbye")
        assert scanner.context == "Goodbye World"

    def test_replace_resumes_after_token(self, make_scanner) -> None:
        """Scanning continues with the next word."""
        scanner = make_scanner("Helo World")
        scanner.start()
        assert scanner.replace("Goodbye").kind is ErrorKind.MISCAPITALIZATION

    def test_replace_all_rewrites_later_lines(self, make_scanner, tmp_path) -> None:
        """The same raw token is replaced on lines read afterwards."""
        scanner = make_scanner("teh cat\nteh car\n")
        scanner.start()
        scanner.replace_all("the")
        assert _staged(tmp_path) == "the cat\nthe car\n"

    def test_replace_all_remembers_mapping(self, make_scanner) -> None:
        """The replacement is kept for the rest of the session."""
        scanner = make_scanner("teh cat")
        scanner.start()
        scanner.replace_all("the")
        assert scanner.replace_all_words == {"teh": "the"}

    def test_ignore_once_flags_next_occurrence(self, make_scanner) -> None:
        """Ignoring once does not affect later occurrences."""
        scanner = make_scanner("Helo\nHelo\n")
        scanner.start()
        assert scanner.ignore_once().word == "Helo"

    def test_ignore_all_skips_later_occurrences(self, make_scanner) -> None:
        """Ignored words are accepted for the rest of the session."""
        scanner = make_scanner("Helo\nHelo\n")
        scanner.start()
        scanner.ignore_all()
        assert scanner.state is ScanState.COMPLETE

    def test_ignore_all_marks_word_ignored(self, make_scanner) -> None:
        """The checker's ignore set holds the word."""
        scanner = make_scanner("Hello wrld")
        scanner.start()
        scanner.ignore_all()
        assert scanner.checker.is_ignored("wrld")

    def test_delete_removes_word(self, make_scanner, tmp_path) -> None:
        """Deleting the first word keeps the rest of the line."""
        scanner = make_scanner("Helo World.")
        scanner.start()
        scanner.delete()
        assert _staged(tmp_path) == "World.\n"

    def test_manual_edit_is_rechecked(self, make_scanner) -> None:
        """Edited text is scanned like any other text."""
        scanner = make_scanner("Helo world")
        scanner.start()
        assert scanner.manual_edit("Hi there").word == "Hi"

    def test_add_to_dictionary_learns_word(self, make_scanner, user_file) -> None:
        """The word is persisted to the user dictionary."""
        scanner = make_scanner("Orthopy is hello")
        scanner.start()
        scanner.add_to_dictionary()
        assert user_file.read_text(encoding="utf-8") == "orthopy\n"

    def test_add_to_dictionary_strips_sentence_end(self, make_scanner) -> None:
        """A trailing terminal mark is not part of the learned word."""
        scanner = make_scanner("Hello orthopy.")
        scanner.start()
        scanner.add_to_dictionary()
        assert scanner.checker.is_valid_word("orthopy")


class TestCommandProtocol:
    """Test dispatch of protocol commands."""

    def test_unknown_command_returns_false(self, make_scanner) -> None:
        """Unrecognized keywords are refused."""
        scanner = make_scanner("Hello wrld")
        scanner.start()
        assert not scanner.handle_command("shout")

    def test_replace_command_carries_word(self, make_scanner) -> None:
        """The text after the colon is the replacement."""
        scanner = make_scanner("Hello wrld")
        scanner.start()
        scanner.handle_command(Command.REPLACE + "world")
        assert scanner.context == "Hello world"

    def test_replace_all_command_is_not_plain_replace(self, make_scanner) -> None:
        """replace-all: is dispatched to replace-all."""
        scanner = make_scanner("teh cat")
        scanner.start()
        scanner.handle_command(Command.REPLACE_ALL + "the")
        assert scanner.replace_all_words == {"teh": "the"}

    def test_exit_command_moves_output(self, make_scanner, tmp_path) -> None:
        """exit: moves the staged document to the given path."""
        scanner = make_scanner("Hello world")
        scanner.start()
        scanner.handle_command(Command.EXIT + str(tmp_path / "saved"))
        assert (tmp_path / "saved.txt").read_text(encoding="utf-8") == "Hello world\n"


class TestFinalization:
    """Test premature exit, export and destruction."""

    def test_premature_exit_writes_current_line(self, make_scanner, tmp_path) -> None:
        """The line under review is saved and later lines are dropped."""
        scanner = make_scanner("Helo\nworld\n")
        scanner.start()
        scanner.premature_exit()
        assert _staged(tmp_path) == "Helo\n"

    def test_premature_exit_completes(self, make_scanner) -> None:
        """The session reports COMPLETE after stopping early."""
        scanner = make_scanner("Helo\nworld\n")
        scanner.start()
        scanner.premature_exit()
        assert scanner.state is ScanState.COMPLETE

    def test_operations_after_premature_exit_do_nothing(self, make_scanner) -> None:
        """Corrections are ignored once the session has stopped."""
        scanner = make_scanner("Helo\nworld\n")
        scanner.start()
        scanner.premature_exit()
        scanner.replace("Hello")
        assert scanner.context == "Helo"

    def test_exit_appends_input_extension(self, make_scanner, tmp_path) -> None:
        """The saved path ends with the document's extension."""
        scanner = make_scanner("Hello world")
        scanner.start()
        assert scanner.exit(str(tmp_path / "saved")) == str(tmp_path / "saved.txt")

    def test_exit_avoids_overwriting(self, make_scanner, tmp_path) -> None:
        """An existing file at the destination gets a +copy sibling instead."""
        (tmp_path / "saved.txt").write_text("keep me")
        scanner = make_scanner("Hello world")
        scanner.start()
        assert scanner.exit(str(tmp_path / "saved.txt")) == str(tmp_path / "saved+copy.txt")

    def test_second_exit_does_nothing(self, make_scanner, tmp_path) -> None:
        """A finalized session cannot be exported twice."""
        scanner = make_scanner("Hello world")
        scanner.start()
        scanner.exit(str(tmp_path / "saved"))
        assert scanner.exit(str(tmp_path / "again")) is None

    def test_destroy_file_removes_staging(self, make_scanner, tmp_path) -> None:
        """Discarding the session deletes the staged output."""
        scanner = make_scanner("Hello wrld")
        scanner.start()
        scanner.destroy_file()
        assert not (tmp_path / "staging" / "temp_output.txt").exists()


class TestNoPendingError:
    """Test that corrective operations need a flagged word."""

    def test_operation_after_completion_keeps_output(self, make_scanner, tmp_path) -> None:
        """A correction after a clean finish does not write the last line again."""
        scanner = make_scanner("hello world\n")
        scanner.start()
        scanner.handle_command(Command.IGNORE)
        assert _staged(tmp_path) == "hello world\n"

    def test_operation_after_completion_keeps_context(self, make_scanner) -> None:
        """A replacement after a clean finish leaves the last line alone."""
        scanner = make_scanner("hello world\n")
        scanner.start()
        scanner.handle_command(Command.REPLACE + "xyz")
        assert scanner.context == "hello world"

    def test_operation_before_start_keeps_context(self, make_scanner) -> None:
        """A replacement before scanning does not touch the first line."""
        scanner = make_scanner("hello wrld\n")
        scanner.handle_command(Command.REPLACE + "xyz")
        assert scanner.context == "hello wrld"

    def test_operation_before_start_writes_nothing(self, make_scanner, tmp_path) -> None:
        """Nothing reaches the staged output before scanning starts."""
        scanner = make_scanner("hello world\nthe cat\n")
        scanner.handle_command(Command.DELETE)
        assert _staged(tmp_path) == ""
