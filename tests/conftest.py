"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')


@pytest.fixture
def sample_email_content():
    """Sample raw email content in MIME format."""
    return (
        b"Return-Path: <john.doe@example.com>\r\n"
        b"From: \"John Doe\" <john.doe@example.com>\r\n"
        b"To: recipient@yourdomain.com\r\n"
        b"Subject: Test Email Subject\r\n"
        b"Content-Type: text/plain; charset=\"UTF-8\"\r\n"
        b"\r\n"
        b"From: not-a-header@example.com\r\n"
    )
