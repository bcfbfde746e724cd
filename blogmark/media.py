"""
Image dimension helpers for inserted media.

Only inline ``data:image`` addresses are inspected; remote addresses are
never fetched.
"""

import base64
import io
import logging
import re

from PIL import Image

logger = logging.getLogger('blogmark')

DATA_URI_PATTERN = re.compile(r'^data:image/[\w.+-]+;base64,(.*)$', re.DOTALL)


def probe_image_size(address):
    """Return ``(width, height)`` of a base64 data URI image, or None."""
    match = DATA_URI_PATTERN.match((address or '').strip())
    if not match:
        return None

    try:
        payload = base64.b64decode(match.group(1))
        with Image.open(io.BytesIO(payload)) as im:
            return im.size
    except (ValueError, OSError, Image.DecompressionBombError) as e:
        logger.debug("Could not read image size from data URI: %s", e)
        return None


def fit_to_width(width, height, max_width):
    """Scale ``(width, height)`` down to ``max_width`` keeping the aspect ratio."""
    if width and width > max_width:
        ratio = max_width / width
        width = max_width
        if height:
            height = int(height * ratio)
    return width, height
