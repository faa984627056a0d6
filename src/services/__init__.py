"""
Utility functions for Lambda handler and CLI operations.

This package contains reusable service functions for reading email header
lines and for S3 interactions.
"""

__all__ = ['email', 's3']
