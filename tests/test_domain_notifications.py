"""
Tests for locating the stored message behind an SQS record.
"""

import json
import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.models import S3Location
from domain.notifications import s3_location_from_record, unwrap_notification


def _receipt(bucket='ses-inbox', key='emails/abc'):
    return {
        "notificationType": "Received",
        "mail": {"source": "john@example.com"},
        "receipt": {"action": {"type": "S3", "bucketName": bucket, "objectKey": key}},
    }


class TestUnwrapNotification:

    def test_direct(self):
        assert unwrap_notification(json.dumps(_receipt())) == _receipt()

    def test_sns_envelope(self):
        body = json.dumps({"Type": "Notification", "Message": json.dumps(_receipt())})

        assert unwrap_notification(body) == _receipt()

    @pytest.mark.parametrize("body", ["not valid json", "", "[1, 2]"])
    def test_not_a_json_object(self, body):
        with pytest.raises(ValueError):
            unwrap_notification(body)


class TestS3LocationFromRecord:

    def test_location(self):
        record = {"messageId": "m1", "body": json.dumps(_receipt('bucket-1', 'key-1'))}

        assert s3_location_from_record(record) == S3Location('bucket-1', 'key-1')

    @pytest.mark.parametrize("notification", [
        {"invalid": "structure"},
        {"mail": {}, "receipt": {"action": {}}},
        {"receipt": {"action": {"bucketName": "bucket-1"}}},
    ])
    def test_missing_location(self, notification):
        record = {"messageId": "m1", "body": json.dumps(notification)}

        with pytest.raises(ValueError, match="does not name an S3 object"):
            s3_location_from_record(record)

    def test_missing_body(self):
        with pytest.raises(ValueError):
            s3_location_from_record({"messageId": "m1"})
