"""
Command-line interface for sender extraction.

Given an .eml file, prints the display name and addr-spec of its From
header as JSON. Given any other file, treats each line as a From header
value (up to the first blank line) and prints one JSON record per line.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from domain.sender_parser import parse_from_header, validate_and_extract
from services import email as email_service

logger = logging.getLogger(__name__)

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


def _configure_logging() -> None:
    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
        root.addHandler(console_handler)


def create_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='from-header-extractor',
        description="Extract display name and addr-spec from email From headers"
    )
    parser.add_argument(
        'path',
        help="file.eml to parse, or a file with one From header value per line"
    )
    return parser


def run_eml(path: Path) -> int:
    """Parse the From header of one message file and print the record."""
    lines = email_service.split_header_lines(path.read_bytes())
    result = parse_from_header(lines)
    print(result.to_json())
    return 0 if result.success else 1


def run_test_strings(path: Path) -> int:
    """Parse every header value listed in a test file and print the records."""
    lines = email_service.split_header_lines(path.read_bytes())
    for value in email_service.read_test_strings(lines):
        result = validate_and_extract(value)
        print(result.to_json())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line tool.

    Args:
        argv: Arguments without the program name (defaults to sys.argv)

    Returns:
        int: Process exit status
    """
    _configure_logging()
    args = create_parser().parse_args(argv)
    path = Path(args.path)

    try:
        if '.eml' in args.path:
            return run_eml(path)
        return run_test_strings(path)
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
