"""
Data models for sender extraction domain.

These type-safe data structures define clear contracts between components.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict


class ErrorKind(Enum):
    """
    Classified reasons a header value is rejected.

    The value of each member is the message shown to callers.
    """
    HEADER_MISSING = '"From" header missing or value is empty'
    NESTED_ANGLE_BRACKETS = "nested < .. > not allowed as part of addr-spec"
    MISSING_DOMAIN = "missing @ domain"
    NO_ADDR_SPEC = "no addr-spec found"
    LOCAL_OR_DOMAIN_DOT_BOUNDARY = (
        "RFC 5322 forbids the localpart (what comes before the last @ "
        "in addr-spec) from ending in a dot"
    )
    MULTIPLE_ADDR_SPECS = "more than one addr-spec given"
    UNTERMINATED_QUOTE = "unterminated quoted part"

    @property
    def message(self) -> str:
        return self.value


class HeaderParseError(ValueError):
    """Raised when a header value cannot be accepted for extraction."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind


@dataclass(frozen=True)
class Mailbox:
    """
    Display name and addr-spec recognized in a header value.

    Attributes:
        display_name: Human-readable name (empty string if absent)
        addr_spec: The local@domain address (empty string if not recognized)
    """
    display_name: str = ""
    addr_spec: str = ""

    @property
    def is_empty(self) -> bool:
        """True when no recognizable address shape was found."""
        return not (self.display_name or self.addr_spec)


@dataclass
class ParseResult:
    """
    Result of parsing one header value.

    On failure both fields are empty strings and ``error`` holds the kind.

    Attributes:
        success: Whether the header value passed validation
        display_name: Extracted display name
        addr_spec: Extracted email address
        error: Error classification (if validation failed)
    """
    success: bool
    display_name: str = ""
    addr_spec: str = ""
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, mailbox: Mailbox) -> "ParseResult":
        return cls(
            success=True,
            display_name=mailbox.display_name,
            addr_spec=mailbox.addr_spec
        )

    @classmethod
    def failed(cls, kind: ErrorKind) -> "ParseResult":
        return cls(success=False, error=kind)

    @property
    def error_message(self) -> Optional[str]:
        """Message for the error kind, or None on success."""
        return self.error.message if self.error else None

    def to_dict(self) -> Dict[str, str]:
        """
        Convert to the output record format.

        Returns:
            Dict with display_name, addr_spec and error ("null" on success)
        """
        return {
            'display_name': self.display_name,
            'addr_spec': self.addr_spec,
            'error': self.error_message or 'null',
        }

    def to_json(self) -> str:
        """Render the output record as indented JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return (
                f"ParseResult(success=True, display_name={self.display_name!r}, "
                f"addr_spec={self.addr_spec!r})"
            )
        else:
            return f"ParseResult(success=False, error={self.error_message})"


@dataclass(frozen=True)
class S3Location:
    """Bucket and key of an S3 object."""
    bucket: str
    key: str

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"
