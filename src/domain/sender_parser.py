"""
Sender identity parsing - validation and extraction combined.

Validation errors are returned as ParseResult with success=False;
no exceptions propagate out of the public functions.
"""

import logging
from typing import Iterable

from .extractor import extract_mailbox
from .models import HeaderParseError, ParseResult
from .validator import validate_header
from services import email as email_service

logger = logging.getLogger(__name__)


def validate_and_extract(raw_header_value: str) -> ParseResult:
    """
    Parse the value of a From header into display name and addr-spec.

    Args:
        raw_header_value: Text following the "From:" label

    Returns:
        ParseResult: Extracted pair, or the classified validation error

    Example:
        >>> validate_and_extract("John Doe <john@example.com>")
        ParseResult(success=True, display_name='John Doe', addr_spec='john@example.com')
    """
    try:
        value = validate_header(raw_header_value)
    except HeaderParseError as e:
        return ParseResult.failed(e.kind)

    mailbox = extract_mailbox(value)
    if mailbox.is_empty:
        logger.debug(f"No address shape recognized in {raw_header_value!r}")

    return ParseResult.ok(mailbox)


def parse_from_header(lines: Iterable[str], field_name: str = 'From:') -> ParseResult:
    """
    Locate the From header in message lines and parse its value.

    Args:
        lines: Message lines with line terminators removed
        field_name: Header label to look for

    Returns:
        ParseResult: HEADER_MISSING when no such header precedes the body
    """
    try:
        header_value = email_service.locate_header(lines, field_name)
    except HeaderParseError as e:
        logger.warning(f"Header lookup failed for {field_name}: {e}")
        return ParseResult.failed(e.kind)

    return validate_and_extract(header_value)
