"""
AWS Lambda entry point: extract the sender of each SES message queued in SQS.

Every record is consumed. A record whose message cannot be located or read
is logged and skipped, never handed back for redelivery.
"""

import logging
import os
from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

from domain.models import ParseResult
from domain.notifications import s3_location_from_record
from domain.sender_parser import parse_from_header
from services import email as email_service
from services import s3 as s3_service

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')
FROM_HEADER_FIELD = os.environ.get('FROM_HEADER_FIELD', 'From:')

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

# Lambda installs its own handler; this one is for local runs
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
    logger.addHandler(console_handler)


def extract_sender(record: Dict[str, Any]) -> ParseResult:
    """
    Parse the sender header of the message behind one SQS record.

    The record is written to the results bucket when one is configured.

    Raises:
        ValueError: If the record names no stored message
        ClientError: If S3 rejects a request
    """
    location = s3_location_from_record(record)
    lines = email_service.split_header_lines(s3_service.read_message(location))
    result = parse_from_header(lines, FROM_HEADER_FIELD)

    target = s3_service.results_location(location)
    if target is not None:
        s3_service.write_sender_record(target, result)
    return result


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Extract senders for a batch of SQS records.

    Returns:
        Dict with an empty batchItemFailures list
    """
    records = event.get('Records', [])
    extracted = 0

    for record in records:
        message_id = record.get('messageId', 'UNKNOWN')
        try:
            result = extract_sender(record)
        except (ValueError, ClientError, BotoCoreError) as e:
            logger.error(f"{message_id}: skipped: {e}")
            continue

        if result.success:
            extracted += 1
            logger.info(f"{message_id}: {result!r}")
        else:
            logger.warning(f"{message_id}: sender rejected: {result.error_message}")

    logger.info(f"[{ENVIRONMENT}] extracted {extracted} of {len(records)} sender(s)")
    return {"batchItemFailures": []}
