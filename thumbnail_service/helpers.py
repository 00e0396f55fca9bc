import logging
import urllib.parse

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from thumbnail_service.config import SAME_KEY_POLICY, SUFFIX_POLICY
from thumbnail_service.exceptions import ConfigurationError, UpstreamFailure

logger = logging.getLogger(__name__)

JPG_MIME = 'image/jpeg'


def get_s3_client(region=None):
    return boto3.client('s3', region_name=region)


def get_s3_record(event):
    """ Return the single S3 notification record carried by the event.

    An s3:ObjectCreated:Put notification holds one record per object, and
    this function handles exactly one object per invocation.
    """
    records = event.get('Records') if isinstance(event, dict) else None
    if not records:
        raise ValueError("Event does not contain any S3 notification records")
    if len(records) > 1:
        logger.warning(f"Event holds {len(records)} records; only the first is processed")
    return records[0]


def get_bucket_and_key(record):
    """ Extract the bucket name and the decoded object key from a record.

    Keys arrive url-encoded: spaces become '+' and non-ascii characters are
    percent-escaped. Example: 'my+photo%C3%A4.jpg' -> 'my photoä.jpg'
    """
    bucket = record['s3']['bucket']['name']
    key = urllib.parse.unquote_plus(record['s3']['object']['key'], encoding='utf-8')
    return bucket, key


def get_thumbnail_key(src_key, policy=SUFFIX_POLICY, suffix='-thumbnail'):
    if policy == SUFFIX_POLICY:
        return f"{src_key}{suffix}"
    if policy == SAME_KEY_POLICY:
        return src_key
    raise ConfigurationError(f"Unknown destination key policy: {policy!r}")


def is_thumbnail_key(key, suffix):
    """ True if the key already names a thumbnail written by this function. """
    return bool(suffix) and key.endswith(suffix)


def read_s3_body(s3_client, bucket_name, object_name):
    try:
        s3_object = s3_client.get_object(Bucket=bucket_name, Key=object_name)
        body = s3_object['Body']
        return body.read()
    except (ClientError, BotoCoreError) as e:
        raise UpstreamFailure(f"Could not read s3://{bucket_name}/{object_name}: {e}") from e


def put_s3_jpeg(s3_client, bucket_name, object_name, body):
    """ Upload JPEG bytes with explicit content type and length.

    Args:
        s3_client: boto3 s3 client.
        bucket_name (str): destination bucket.
        object_name (str): destination key.
        body (bytes): encoded JPEG data.

    Returns:
        the put_object response dict.
    """
    try:
        return s3_client.put_object(
            Bucket=bucket_name,
            Key=object_name,
            Body=body,
            ContentType=JPG_MIME,
            ContentLength=len(body),
        )
    except (ClientError, BotoCoreError) as e:
        raise UpstreamFailure(f"Could not write s3://{bucket_name}/{object_name}: {e}") from e
