"""
Structural validation of From header values.

The validator rejects header values the extractor cannot safely interpret
and applies the light rewriting the extractor expects:

1. nested <> in addr-spec
2. missing @ domain
3. no addr-spec found
4. local part or domain bounded by a dot
5. more than one addr-spec given after a single quoted part
6. quoted display name containing <...> turned into a comment
7. unterminated quoted part

Rules are applied in that order and the first failing rule wins.
"""

import logging
import re

from .comments import remove_nested_comments
from .models import ErrorKind, HeaderParseError

logger = logging.getLogger(__name__)

# Content within < > that contains an @ symbol
BRACKETED_ADDR_SPEC = re.compile(r'<([^>][^>@]*@[^>]+)>')

ESCAPED_QUOTE = '\\"'


def count_addr_specs(text: str) -> int:
    """
    Count angle-bracketed addr-specs in a string.

    Args:
        text: Portion of a header value

    Returns:
        int: Number of <local@domain> occurrences
    """
    return len(BRACKETED_ADDR_SPEC.findall(text))


def validate_header(value: str) -> str:
    """
    Validate a From header value and prepare it for extraction.

    Args:
        value: Header value following the field label

    Returns:
        str: The value, possibly rewritten (bracket to comment, escaped
        quotes removed)

    Raises:
        HeaderParseError: If the value violates one of the validation rules
    """
    value = value.strip('\r\n')

    if '>>' in value or '<<' in value:
        _reject(value, ErrorKind.NESTED_ANGLE_BRACKETS)

    at_parts = value.split('@')
    if '<' in value and len(at_parts) == 1:
        _reject(value, ErrorKind.MISSING_DOMAIN)

    if len(at_parts) == 1:
        _reject(value, ErrorKind.NO_ADDR_SPEC)

    local, domain = at_parts[0], at_parts[1]
    if local.startswith('.') or local.endswith('.') or domain.startswith('.'):
        _reject(value, ErrorKind.LOCAL_OR_DOMAIN_DOT_BOUNDARY)

    # Only a single quoted part is checked; other shapes pass through
    quote_parts = value.split('"')
    if len(quote_parts) == 3 and count_addr_specs(quote_parts[2]) > 1:
        _reject(value, ErrorKind.MULTIPLE_ADDR_SPECS)

    if len(quote_parts) > 1 and '<' in quote_parts[1] and '>' in quote_parts[1]:
        value = value.replace('<', '(', 1).replace('>', ')', 1)
        value = remove_nested_comments(value)

    quotes = value.count('"')
    escaped_quotes = value.count(ESCAPED_QUOTE)
    if escaped_quotes > 0:
        if quotes % 2 == 0:
            value = value.replace(ESCAPED_QUOTE, '')
        escaped_quotes -= 1
        quotes -= 1

    if escaped_quotes % 2 != 0 or quotes % 2 != 0:
        _reject(value, ErrorKind.UNTERMINATED_QUOTE)

    return value


def _reject(value: str, kind: ErrorKind) -> None:
    logger.debug(f"Rejected header value {value!r}: {kind.name}")
    raise HeaderParseError(kind)
