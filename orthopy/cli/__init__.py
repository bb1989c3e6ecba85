"""Command-line front end for OrthoPy."""

from orthopy.cli.parser import create_parser
from orthopy.cli.session import SessionOutcome, answer_to_command, format_error, run_session

__all__ = [
    "SessionOutcome",
    "answer_to_command",
    "create_parser",
    "format_error",
    "run_session",
]
