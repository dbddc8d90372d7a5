"""Loading of image resources (company logos).

Loads are blocking and never retried; any failure aborts the document.
"""

import logging
import urllib.request
from pathlib import Path
from typing import IO, Union
from urllib.error import URLError

from rtldoc.errors import ResourceError

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, str, Path, IO[bytes]]


def is_remote(source: str) -> bool:
    """Check whether a string source refers to a remote URL."""
    return source.startswith("http://") or source.startswith("https://")


def load_image(source: ImageSource) -> bytes:
    """Load image bytes from a URL, a local path, raw bytes or a stream.

    Args:
        source: Image reference.

    Returns:
        Raw image bytes.

    Raises:
        ResourceError: If the image cannot be fetched or read.
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)

    if isinstance(source, str) and is_remote(source):
        logger.debug("Fetching image %s", source)
        try:
            with urllib.request.urlopen(source) as response:
                return response.read()
        except (URLError, OSError, ValueError) as e:
            raise ResourceError(f"Cannot fetch image {source}: {e}") from e

    if isinstance(source, (str, Path)):
        path = Path(source)
        logger.debug("Reading image %s", path)
        try:
            return path.read_bytes()
        except OSError as e:
            raise ResourceError(f"Cannot read image {path}: {e}") from e

    try:
        return source.read()
    except (AttributeError, OSError) as e:
        raise ResourceError(f"Cannot read image from {source!r}: {e}") from e
