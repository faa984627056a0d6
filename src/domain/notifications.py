"""
Finding the raw message behind an SQS record.

SES stores each received message in S3 and names the object in the receipt
action of its notification. The notification reaches SQS either directly or
inside an SNS envelope.
"""

import json
from typing import Any, Dict

from .models import S3Location


def unwrap_notification(body: str) -> Dict[str, Any]:
    """Decode an SQS message body, removing an SNS envelope if present."""
    payload = json.loads(body)
    if not isinstance(payload, dict):
        raise ValueError("SQS message body is not a JSON object")

    if payload.get('Type') == 'Notification' and 'Message' in payload:
        return unwrap_notification(payload['Message'])
    return payload


def s3_location_from_record(record: Dict[str, Any]) -> S3Location:
    """
    Locate the stored message for one SQS record.

    Args:
        record: SQS record whose body is an SES notification

    Returns:
        S3Location: Bucket and key of the raw message

    Raises:
        ValueError: If the body is not JSON or names no S3 object
    """
    notification = unwrap_notification(record.get('body', ''))
    action = notification.get('receipt', {}).get('action', {})

    bucket = action.get('bucketName')
    key = action.get('objectKey')
    if not bucket or not key:
        raise ValueError("SES notification does not name an S3 object")

    return S3Location(bucket=bucket, key=key)
