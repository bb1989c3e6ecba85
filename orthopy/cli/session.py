"""Terminal front end: shows each flagged word and sends the user's choice."""

from collections.abc import Callable
from enum import Enum

from loguru import logger

from orthopy.core.types import Command, ErrorKind, ErrorRecord, ScanState
from orthopy.document.scanner import DocumentScanner
from orthopy.document.tokenizer import tokenize

QUIT = "q"
DISCARD = "x"

_KIND_LABELS = {
    ErrorKind.SPELLING: "Not a valid word",
    ErrorKind.CAPITALIZATION: "Should be capitalized",
    ErrorKind.MISCAPITALIZATION: "Capitalized but shouldn't be",
    ErrorKind.DOUBLE_WORD: "Double word",
}


class SessionOutcome(Enum):
    """How an interactive session ended."""

    FINISHED = "finished"
    QUIT = "quit"
    DISCARDED = "discarded"


def _suggestion(record: ErrorRecord, number: str) -> str | None:
    if not number.isdigit():
        return None
    position = int(number) - 1
    if 0 <= position < len(record.suggestions):
        return record.suggestions[position]
    return None


def answer_to_command(answer: str, record: ErrorRecord) -> str | None:
    """Translate a typed answer into a protocol command.

    Returns None for answers that do not map to a command (including the
    quit/discard answers, which end the session instead).
    """
    answer = answer.strip()
    if not answer:
        return None

    head, _, rest = answer.partition(" ")
    rest = rest.strip()

    if head.isdigit() and not rest:
        word = _suggestion(record, head)
        return Command.REPLACE + word if word else None
    if head == "a":
        word = _suggestion(record, rest)
        return Command.REPLACE_ALL + word if word else None
    if head == "r" and rest:
        return Command.REPLACE + rest
    if head == "R" and rest:
        return Command.REPLACE_ALL + rest
    if head == "e" and rest:
        return Command.MANUAL_EDIT + rest
    if answer == "i":
        return Command.IGNORE
    if answer == "I":
        return Command.IGNORE_ALL
    if answer == "d":
        return Command.DELETE
    if answer == "+":
        return Command.ADD_TO_DICT
    return None


def format_error(record: ErrorRecord, context: str) -> str:
    """Render the flagged line with the word marked, then the suggestions."""
    tokens = tokenize(context)
    if 0 <= record.token_index < len(tokens):
        tokens[record.token_index] = f">>{tokens[record.token_index]}<<"
    lines = [f"{_KIND_LABELS[record.kind]}: {record.word}", "  " + "".join(tokens)]
    for number, word in enumerate(record.suggestions, start=1):
        lines.append(f"  {number:>2}. {word}")
    return "\n".join(lines)


def run_session(
    scanner: DocumentScanner,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> SessionOutcome:
    """Drive ``scanner`` until the document is done or the user stops."""
    record = scanner.start()
    while scanner.state is ScanState.ERROR_PENDING and record is not None:
        write("")
        write(format_error(record, scanner.context or ""))
        write(f"[{scanner.progress:.0f}%]")
        answer = read("> ")

        if answer.strip() == QUIT:
            scanner.handle_command(Command.PREMATURE_EXIT)
            return SessionOutcome.QUIT
        if answer.strip() == DISCARD:
            return SessionOutcome.DISCARDED

        command = answer_to_command(answer, record)
        if command is None:
            write("Unrecognized answer; see --help for the list of answers")
            continue
        scanner.handle_command(command)
        record = scanner.current_error

    logger.info(f"Checked {scanner.statistics.line_count} lines")
    return SessionOutcome.FINISHED
