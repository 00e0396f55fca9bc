import logging

from thumbnail_service.config import load_config
from thumbnail_service.helpers import get_s3_client, get_s3_record
from thumbnail_service.helpers import get_bucket_and_key
from thumbnail_service.helpers import get_thumbnail_key, is_thumbnail_key
from thumbnail_service.thumbnails import resize_handler

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handle_s3_object_created(event, context):
    """ Lambda entry point for s3:ObjectCreated notifications.

    Returns "Ok" once the thumbnail is written, or None when the object is
    skipped (foreign bucket, or an object that is already a thumbnail).
    Any failure is logged and re-raised so the invocation is reported as failed.
    """
    logger.info(f"event: {event}")
    config = load_config()

    record = get_s3_record(event)
    bucket, key = get_bucket_and_key(record)

    # Normally the trigger is bucket specific, so this only guards misconfiguration.
    if bucket != config.source_bucket:
        logger.warning(f"Ignoring {bucket}/{key}: not from source bucket {config.source_bucket}")
        return None

    # Writing thumbnails back into the source bucket re-triggers this function.
    if config.thumbnail_bucket == bucket and is_thumbnail_key(key, config.thumbnail_suffix):
        logger.info(f"Skipping {bucket}/{key}: already a thumbnail")
        return None

    thumbnail_key = get_thumbnail_key(key, config.dest_key_policy, config.thumbnail_suffix)

    try:
        s3_client = get_s3_client(config.region)
        resize_handler(
            s3_client,
            bucket,
            key,
            config.thumbnail_bucket,
            thumbnail_key,
            config.max_box,
            config.jpeg_quality,
        )
    except Exception:
        logger.exception(f"Failed to create thumbnail for {bucket}/{key}")
        raise

    return "Ok"
