import os
import logging
from dataclasses import dataclass
from typing import Optional

from thumbnail_service.exceptions import ConfigurationError
from thumbnail_service.scaling import Dimensions

logger = logging.getLogger(__name__)

# Destination key policies. 'suffix' writes <key><THUMBNAIL_SUFFIX>,
# 'same' writes the thumbnail under the source key.
SUFFIX_POLICY = 'suffix'
SAME_KEY_POLICY = 'same'
DEST_KEY_POLICIES = (SUFFIX_POLICY, SAME_KEY_POLICY)


@dataclass(frozen=True)
class ThumbnailConfig:
    source_bucket: str
    thumbnail_bucket: str
    thumbnail_suffix: str
    dest_key_policy: str
    max_box: Dimensions
    jpeg_quality: int
    region: Optional[str] = None


def _get_int(environ, name, default):
    raw = environ.get(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def load_config(environ=os.environ) -> ThumbnailConfig:
    """ Build the function configuration from environment variables.

    Args:
        environ (mapping): defaults to os.environ; tests pass a plain dict.

    Returns:
        ThumbnailConfig

    Raises:
        ConfigurationError: if a value is malformed or the combination of
            buckets and key policy would make the function overwrite its input.
    """
    source_bucket = environ.get('SOURCE_BUCKET', 'tehame')
    thumbnail_bucket = environ.get('THUMBNAIL_BUCKET', 'tehame-thumbnails')
    thumbnail_suffix = environ.get('THUMBNAIL_SUFFIX', '-thumbnail')
    dest_key_policy = environ.get('DEST_KEY_POLICY', SUFFIX_POLICY).lower()
    max_width = _get_int(environ, 'THUMBNAIL_MAX_WIDTH', 200)
    max_height = _get_int(environ, 'THUMBNAIL_MAX_HEIGHT', 200)
    jpeg_quality = _get_int(environ, 'JPEG_QUALITY', 75)
    region = environ.get('REGION')

    if dest_key_policy not in DEST_KEY_POLICIES:
        raise ConfigurationError(
            f"DEST_KEY_POLICY must be one of {DEST_KEY_POLICIES}, got {dest_key_policy!r}")

    if max_width <= 0 or max_height <= 0:
        raise ConfigurationError(
            f"Thumbnail box must be positive, got {max_width}x{max_height}")

    # Pillow recommends staying at or below 95
    if not 1 <= jpeg_quality <= 95:
        raise ConfigurationError(f"JPEG_QUALITY must be in 1..95, got {jpeg_quality}")

    if dest_key_policy == SUFFIX_POLICY and not thumbnail_suffix:
        raise ConfigurationError("THUMBNAIL_SUFFIX must not be empty with the 'suffix' policy")

    if dest_key_policy == SAME_KEY_POLICY and thumbnail_bucket == source_bucket:
        raise ConfigurationError(
            f"The '{SAME_KEY_POLICY}' key policy needs a THUMBNAIL_BUCKET different "
            f"from SOURCE_BUCKET ({source_bucket}), or originals are overwritten")

    config = ThumbnailConfig(
        source_bucket=source_bucket,
        thumbnail_bucket=thumbnail_bucket,
        thumbnail_suffix=thumbnail_suffix,
        dest_key_policy=dest_key_policy,
        max_box=Dimensions(max_width, max_height),
        jpeg_quality=jpeg_quality,
        region=region,
    )
    logger.debug(f"Loaded config: {config}")
    return config
