import io
import logging

from PIL import Image, UnidentifiedImageError

from thumbnail_service.exceptions import DecodeFailure
from thumbnail_service.helpers import read_s3_body, put_s3_jpeg
from thumbnail_service.scaling import Dimensions, scale_to_fit

logger = logging.getLogger(__name__)

JPG_TYPE = 'JPEG'


def make_thumbnail(image_bytes, max_box, quality=75):
    """ Decode an image, shrink it into max_box and re-encode it as JPEG.

    Args:
        image_bytes (bytes): the original object contents.
        max_box (Dimensions): bounded box for the output.
        quality (int): JPEG quality passed to Pillow.

    Returns:
        bytes: the encoded JPEG thumbnail.

    Raises:
        DecodeFailure: if Pillow cannot read the image.
        InvalidDimensions: if the image or the box has a zero-length side.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            image.load()
            src = Dimensions(*image.size)
            dest = scale_to_fit(src, max_box)
            logger.info(f"Scaling {src.width}x{src.height} to {dest.width}x{dest.height}")

            # JPEG has no alpha channel or palette
            if image.mode != 'RGB':
                image = image.convert('RGB')
            scaled_image = image.resize((dest.width, dest.height), Image.LANCZOS)
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeFailure(f"Could not decode image: {e}") from e

    buffer = io.BytesIO()
    scaled_image.save(buffer, format=JPG_TYPE, quality=quality)
    return buffer.getvalue()


def resize_handler(s3_client, bucket, key, thumbnail_bucket, thumbnail_key, max_box, quality=75):
    """ Fetch an image from s3, thumbnail it, and upload the result.

    Returns:
        int: number of bytes written to the destination object.
    """
    image_bytes = read_s3_body(s3_client, bucket, key)
    thumbnail = make_thumbnail(image_bytes, max_box, quality)

    logger.info(f"Writing to: {thumbnail_bucket}/{thumbnail_key}")
    put_s3_jpeg(s3_client, thumbnail_bucket, thumbnail_key, thumbnail)
    logger.info(f"Successfully resized {bucket}/{key} and uploaded to {thumbnail_bucket}/{thumbnail_key}")
    return len(thumbnail)
