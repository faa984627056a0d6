"""
Tests for domain models (data structures).
"""

import json
from dataclasses import FrozenInstanceError
import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.models import (
    ErrorKind,
    HeaderParseError,
    Mailbox,
    ParseResult,
    S3Location,
)


class TestErrorKind:
    """Test error classifications."""

    def test_messages(self):
        assert ErrorKind.NESTED_ANGLE_BRACKETS.message == "nested < .. > not allowed as part of addr-spec"
        assert ErrorKind.MISSING_DOMAIN.message == "missing @ domain"
        assert ErrorKind.NO_ADDR_SPEC.message == "no addr-spec found"
        assert ErrorKind.MULTIPLE_ADDR_SPECS.message == "more than one addr-spec given"
        assert ErrorKind.UNTERMINATED_QUOTE.message == "unterminated quoted part"

    def test_seven_kinds(self):
        assert len(ErrorKind) == 7

    def test_header_parse_error(self):
        """HeaderParseError is a ValueError carrying its kind."""
        error = HeaderParseError(ErrorKind.MISSING_DOMAIN)

        assert isinstance(error, ValueError)
        assert error.kind == ErrorKind.MISSING_DOMAIN
        assert str(error) == "missing @ domain"


class TestMailbox:
    """Test Mailbox dataclass."""

    def test_defaults_are_empty(self):
        mailbox = Mailbox()

        assert mailbox.display_name == ""
        assert mailbox.addr_spec == ""
        assert mailbox.is_empty is True

    def test_address_only_is_not_empty(self):
        assert Mailbox(addr_spec="john@example.com").is_empty is False

    def test_frozen(self):
        mailbox = Mailbox("John", "john@example.com")

        with pytest.raises(FrozenInstanceError):
            mailbox.display_name = "Jane"


class TestParseResult:
    """Test ParseResult dataclass."""

    def test_ok(self):
        result = ParseResult.ok(Mailbox("John Doe", "john@example.com"))

        assert result.success is True
        assert result.error is None
        assert result.error_message is None
        assert result.to_dict() == {
            'display_name': "John Doe",
            'addr_spec': "john@example.com",
            'error': 'null',
        }

    def test_failed(self):
        result = ParseResult.failed(ErrorKind.NO_ADDR_SPEC)

        assert result.success is False
        assert result.display_name == ""
        assert result.addr_spec == ""
        assert result.to_dict() == {
            'display_name': "",
            'addr_spec': "",
            'error': "no addr-spec found",
        }

    def test_to_json(self):
        """JSON record is indented by two spaces."""
        result = ParseResult.ok(Mailbox("Jürgen", "j@example.de"))

        rendered = result.to_json()

        assert json.loads(rendered) == result.to_dict()
        assert '\n  "display_name": "Jürgen"' in rendered

    def test_repr(self):
        ok = ParseResult.ok(Mailbox("", "john@example.com"))
        failed = ParseResult.failed(ErrorKind.MISSING_DOMAIN)

        assert repr(ok) == "ParseResult(success=True, display_name='', addr_spec='john@example.com')"
        assert repr(failed) == "ParseResult(success=False, error=missing @ domain)"


class TestS3Location:
    """Test S3Location dataclass."""

    def test_uri(self):
        location = S3Location(bucket="ses-inbox", key="emails/abc")

        assert location.uri == "s3://ses-inbox/emails/abc"

    def test_immutable(self):
        with pytest.raises(FrozenInstanceError):
            S3Location("a", "b").key = "c"
