"""Utility functions for OrthoPy."""

from orthopy.utils.helpers import (
    ensure_directory_exists,
    ensure_parent_directory,
    expand_file_path,
    write_file_safely,
)
from orthopy.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "add_log_file_handler",
    "ensure_directory_exists",
    "ensure_parent_directory",
    "expand_file_path",
    "setup_logger",
    "write_file_safely",
]
