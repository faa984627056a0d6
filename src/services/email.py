"""
Email header utilities for Lambda handlers and the command line.

This module provides reusable functions for reading header lines out of
raw email content.
"""

import logging
from typing import Iterable, List, Union

from domain.models import ErrorKind, HeaderParseError

logger = logging.getLogger(__name__)


def split_header_lines(email_content: Union[bytes, str]) -> List[str]:
    """
    Split raw email content into lines without line terminators.

    Args:
        email_content: Raw email bytes (e.g. from S3) or decoded text

    Returns:
        list: Lines with "\\n" and a trailing "\\r" removed

    Example:
        >>> split_header_lines(b"From: a@example.com\\r\\nTo: b@example.com\\r\\n")
        ['From: a@example.com', 'To: b@example.com', '']
    """
    if isinstance(email_content, bytes):
        email_content = email_content.decode('utf-8', errors='replace')

    lines = email_content.split('\n')
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def locate_header(lines: Iterable[str], field_name: str = 'From:') -> str:
    """
    Find a header line and return its value.

    Only the header section is searched: the scan stops at the first
    empty line. The label match is case-insensitive.

    Args:
        lines: Message lines with line terminators removed
        field_name: Header label including the colon (e.g. "From:")

    Returns:
        str: Text after the label, with surrounding whitespace trimmed

    Raises:
        HeaderParseError: If the header is not present before the body

    Example:
        >>> locate_header(["Subject: Hi", "FROM: Jane <jane@example.com>"])
        'Jane <jane@example.com>'
    """
    prefix = field_name.lower()
    for line in lines:
        if line == '':
            break
        if line.lower().startswith(prefix):
            return line[len(field_name):].strip()

    raise HeaderParseError(ErrorKind.HEADER_MISSING)


def read_test_strings(lines: Iterable[str]) -> List[str]:
    """
    Collect header values from a test file, one per line.

    Reading stops at the first empty line.

    Args:
        lines: File lines with line terminators removed

    Returns:
        list: Header values in file order
    """
    values = []
    for line in lines:
        if line == '':
            break
        values.append(line)

    logger.info(f"Read {len(values)} test header value(s)")
    return values
