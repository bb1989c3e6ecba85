"""Session summary report."""

from datetime import datetime
from pathlib import Path

from loguru import logger
import yaml

from orthopy.document.statistics import SessionStatistics
from orthopy.utils.helpers import write_file_safely


def create_report_directory(reports_path: str, document_name: str) -> Path:
    """Create a timestamped report directory.

    Args:
        reports_path: Base path for reports directory
        document_name: Checked document's file name, included in the folder name

    Returns:
        Path to the created report directory
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(reports_path) / f"{timestamp}_{Path(document_name).stem}"
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def build_summary(
    statistics: SessionStatistics,
    document: str,
    output: str | None,
    ignored_words: set[str],
    replacements: dict[str, str],
) -> dict:
    """Collect the session's outcome into a plain dict for serialization."""
    return {
        "document": document,
        "output": output,
        "statistics": {
            "words": statistics.word_count,
            "lines": statistics.line_count,
            "characters": statistics.char_count,
            "progress": round(statistics.progress, 2),
        },
        "errors": dict(statistics.error_counts),
        "ignored_words": sorted(ignored_words),
        "replace_all": dict(sorted(replacements.items())),
    }


def generate_summary_report(summary: dict, report_dir: Path) -> Path:
    """Write ``summary.yml`` into ``report_dir``.

    Raises:
        yaml.YAMLError: If YAML serialization fails
    """
    filepath = report_dir / "summary.yml"

    def write_summary_content(f):
        try:
            yaml.safe_dump(
                summary,
                f,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
            )
        except yaml.YAMLError as e:
            logger.error(f"✗ YAML serialization error writing {filepath}: {e}")
            raise

    write_file_safely(filepath, write_summary_content, "writing summary report")
    return filepath
