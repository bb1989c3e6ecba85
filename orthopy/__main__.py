"""Main entry point for the orthopy package."""

from pathlib import Path

from loguru import logger

from orthopy.checking import SpellChecker
from orthopy.cli import SessionOutcome, create_parser, run_session
from orthopy.core import Command, Config, load_config
from orthopy.data import Dictionary, reset_user_dictionary, seed_stock_dictionary
from orthopy.document import DocumentScanner
from orthopy.reports import build_summary, create_report_directory, generate_summary_report
from orthopy.utils import add_log_file_handler, setup_logger


def default_output_path(input_path: str) -> str:
    """notes.txt -> notes_checked.txt, next to the input."""
    source = Path(input_path)
    return str(source.with_name(f"{source.stem}_checked{source.suffix}"))


def check_document(input_path: str, config: Config) -> str | None:
    """Run one interactive session and export (or discard) its output.

    Returns:
        The saved document path, or None if the output was discarded
    """
    seed_stock_dictionary(
        config.dictionary_path, overwrite=config.seed_dictionary, verbose=config.verbose
    )
    if config.reset_user_dictionary:
        reset_user_dictionary(config.user_dictionary_path)
        logger.info("User dictionary cleared")

    with Dictionary(
        config.dictionary_path, config.user_dictionary_path, config.verbose
    ) as dictionary:
        checker = SpellChecker(dictionary)
        scanner = DocumentScanner(
            input_path, checker, config.temp_output_path, config.suggestion_count
        )
        outcome = run_session(scanner)

        saved = None
        if outcome is SessionOutcome.DISCARDED:
            scanner.handle_command(Command.DESTROY_FILE)
            logger.warning("Output discarded")
        else:
            output = config.output or default_output_path(input_path)
            saved = scanner.exit(output)
            if outcome is SessionOutcome.QUIT:
                logger.warning("Stopped early; the rest of the document was not saved")

        if config.reports:
            report_dir = create_report_directory(config.reports, input_path)
            summary = build_summary(
                scanner.statistics,
                input_path,
                saved,
                checker.ignored_words,
                scanner.replace_all_words,
            )
            generate_summary_report(summary, report_dir)
            if config.verbose:
                logger.info(f"  Summary written to {report_dir}/")

    return saved


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Dictionary: {config.dictionary_path}")
        logger.info(f"  User dictionary: {config.user_dictionary_path}")
        logger.info(f"  Staging file: {config.temp_output_path}")
        logger.info(f"  Suggestions: {config.suggestion_count}")
        logger.info("")

    try:
        saved = check_document(args.input, config)
        if saved:
            logger.info(f"✓ Saved corrected document to {saved}")
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Spell-check interrupted by user")
        raise
    except Exception:
        logger.error("✗ Spell-check failed")
        raise


if __name__ == "__main__":
    main()
