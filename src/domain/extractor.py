"""
Display name and addr-spec extraction from validated header values.

The extractor tries four address shapes in a fixed order and returns the
first match. It never fails: a value matching none of the shapes yields an
empty Mailbox.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .comments import remove_nested_comments
from .models import Mailbox

_FLAGS = re.IGNORECASE | re.ASCII

# local@domain.tld inside angle brackets; the domain splits at its first
# dot after the first character, so adjacent pieces never share characters
_BRACKETED_ADDR = r'([^@\s<>]+@[^@\s<>][^@\s<>.]*\.[^@\s<>]+)'
# local@domain.tld without brackets, TLD of two or more letters
_BARE_ADDR = r'([a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,})'

CURLY_QUOTES = ('\u201c', '\u201d')


@dataclass(frozen=True)
class AddressPattern:
    """
    One tier of the extraction cascade.

    Attributes:
        name: Tier name used in diagnostics
        regex: Compiled pattern matched against the whole value
        has_display_name: Whether group 1 is the display name
    """
    name: str
    regex: re.Pattern
    has_display_name: bool

    def match(self, value: str) -> Optional[Mailbox]:
        m = self.regex.fullmatch(value)
        if m is None:
            return None
        if self.has_display_name:
            return Mailbox(display_name=m.group(1).strip(), addr_spec=m.group(2))
        return Mailbox(addr_spec=m.group(1))


CASCADE: Tuple[AddressPattern, ...] = (
    # display name and <email>
    AddressPattern(
        'name_bracketed',
        re.compile(r'"?([^"<]*)(?:"\s*)?<\s*' + _BRACKETED_ADDR + r'\s*>', _FLAGS),
        True
    ),
    # display name (ending in a non-space) and bare email
    AddressPattern(
        'name_bare',
        re.compile(r'([^<"\s@](?:[^<@"]*[^<@"\s])?)\s+' + _BARE_ADDR, _FLAGS),
        True
    ),
    # just <email>
    AddressPattern(
        'bracketed_only',
        re.compile(r'<\s*' + _BRACKETED_ADDR + r'\s*>', _FLAGS),
        False
    ),
    # just email
    AddressPattern('bare_only', re.compile(_BARE_ADDR, _FLAGS), False),
)


def normalize_value(value: str) -> str:
    """
    Prepare a validated header value for pattern matching.

    Curly quotes are folded to ASCII quotes and all quotes are then dropped,
    comments are removed and the result is trimmed.
    """
    for curly in CURLY_QUOTES:
        value = value.replace(curly, '"')
    value = value.replace('"', '')
    return remove_nested_comments(value).strip()


def match_tier(value: str) -> Optional[str]:
    """Return the name of the first tier matching a normalized value."""
    for pattern in CASCADE:
        if pattern.regex.fullmatch(value):
            return pattern.name
    return None


def extract_mailbox(value: str) -> Mailbox:
    """
    Extract the display name and addr-spec from a validated header value.

    Args:
        value: Output of validate_header

    Returns:
        Mailbox: Extracted pair; empty when no address shape matched
    """
    value = normalize_value(value)
    for pattern in CASCADE:
        mailbox = pattern.match(value)
        if mailbox is not None:
            return mailbox
    return Mailbox()
