"""Command-line interface for the OrthoPy project."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="orthopy",
        description="Interactively spell-check a plain text document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a document and save the corrected copy
  %(prog)s notes.txt -o notes_checked.txt

  # Use a custom word list and fewer suggestions
  %(prog)s notes.txt -o fixed --dictionary ~/words.txt --suggestions 5

  # Rebuild the stock dictionary from the english-words package first
  %(prog)s notes.txt -o fixed --seed-dictionary -v

  # Using JSON config
  %(prog)s notes.txt --config config.json

Answers at each flagged word:
  <n>         replace with suggestion n        a <n>   replace all with suggestion n
  r <word>    replace with <word>              R <word> replace all with <word>
  i           ignore once                      I       ignore all
  d           delete the word                  e <text> replace with edited text
  +           add the word to the dictionary
  q           stop and save what was checked   x       stop and discard the output

Example config.json:
{
  "dictionary_path": "~/.orthopy/words_alpha.txt",
  "user_dictionary_path": "~/.orthopy/user_dictionary.txt",
  "temp_output_path": "~/.orthopy/temp_output.txt",
  "suggestion_count": 10,
  "reports": "./reports",
  "verbose": true
}
        """,
    )

    parser.add_argument("input", type=str, help="Document to spell-check")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Where to save the corrected document (the input's extension is appended)",
    )
    parser.add_argument(
        "--staging",
        dest="temp_output_path",
        type=str,
        help="Temporary file corrected lines are written to before saving",
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to write a session summary (creates timestamped subdirectories)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Word lists
    parser.add_argument("--dictionary", dest="dictionary_path", type=str, help="Stock word list")
    parser.add_argument(
        "--user-dictionary",
        dest="user_dictionary_path",
        type=str,
        help="Word list that learned words are appended to",
    )
    parser.add_argument(
        "--seed-dictionary",
        action="store_true",
        help="Rewrite the stock word list from the english-words package",
    )
    parser.add_argument(
        "--reset-user-dictionary",
        action="store_true",
        help="Forget every learned word before checking",
    )

    # Parameters
    parser.add_argument(
        "-n",
        "--suggestions",
        dest="suggestion_count",
        type=int,
        help="Number of suggestions shown per flagged word (default: 10)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
