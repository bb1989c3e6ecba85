"""Reports written at the end of a session."""

from orthopy.reports.summary import build_summary, create_report_directory, generate_summary_report

__all__ = [
    "build_summary",
    "create_report_directory",
    "generate_summary_report",
]
