"""
Amazon S3 access for the Lambda front-end.

Raw messages are read from the bucket SES delivers to. Sender records are
written as JSON under RESULTS_S3_PREFIX when RESULTS_S3_BUCKET is set.
"""

import logging
import os
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from domain.models import ParseResult, S3Location

logger = logging.getLogger(__name__)

RESULTS_BUCKET = os.environ.get('RESULTS_S3_BUCKET', '')
RESULTS_PREFIX = os.environ.get('RESULTS_S3_PREFIX', 'senders/')

# One attempt per call; failed records are not retried
s3_client = boto3.client('s3', config=Config(
    retries={'max_attempts': 1, 'mode': 'standard'},
    connect_timeout=10,
    read_timeout=60
))

NOT_FOUND_CODES = ('NoSuchKey', 'NoSuchBucket')


def read_message(location: S3Location) -> bytes:
    """
    Download a raw message.

    Raises:
        ValueError: If the bucket or object does not exist
        ClientError: For any other S3 failure
    """
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
    except ClientError as e:
        if e.response.get('Error', {}).get('Code') in NOT_FOUND_CODES:
            raise ValueError(f"No message stored at {location.uri}") from e
        raise
    return response['Body'].read()


def results_location(source: S3Location) -> Optional[S3Location]:
    """Where the sender record for a message is kept, or None if records are not kept."""
    if not RESULTS_BUCKET:
        return None
    return S3Location(bucket=RESULTS_BUCKET, key=f"{RESULTS_PREFIX}{source.key}.json")


def write_sender_record(location: S3Location, result: ParseResult) -> None:
    """Store a sender record as JSON."""
    s3_client.put_object(
        Bucket=location.bucket,
        Key=location.key,
        Body=result.to_json().encode('utf-8'),
        ContentType='application/json'
    )
    logger.info(f"Wrote sender record to {location.uri}")
