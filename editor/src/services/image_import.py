"""
StitchCraft - Image Import

Decoding of image files into layer sources, and the batch barrier that
holds a multi-file import back until every file has either decoded or
failed.

This module is Qt-free; services/import_worker.py runs the decode calls
on a thread pool and feeds the results into an ImportBatch.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, List, Optional

from PIL import Image, UnidentifiedImageError

from constants import SUPPORTED_IMAGE_EXTENSIONS

logger = logging.getLogger('ImageImport')


@dataclass(frozen=True)
class DecodedImage:
    """Pixel data plus natural size for one successfully decoded file."""
    name: str
    image_ref: object  # PIL.Image in RGBA, owned by the renderer once committed
    width: int
    height: int


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding one file: image on success, error text on failure."""
    path: str
    image: Optional[DecodedImage] = None
    error: Optional[str] = None

    @property
    def ok(self):
        return self.image is not None


def is_supported_image(path):
    return os.path.splitext(path)[1].lower() in SUPPORTED_IMAGE_EXTENSIONS


def decode_image_file(path) -> DecodeResult:
    """Decode one image file fully

    The whole image is loaded (not just the header) so truncated or corrupt
    files fail here rather than at paint time.

    Args:
        path: File path

    Returns:
        DecodeResult; never raises for unreadable or malformed files
    """
    name = os.path.basename(path)
    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert('RGBA')
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError) as e:
        logger.warning(f"Failed to decode {name}: {e}")
        return DecodeResult(path=path, error=str(e))

    width, height = rgba.size
    logger.debug(f"Decoded {name} ({width}x{height})")
    return DecodeResult(path=path, image=DecodedImage(name, rgba, width, height))


class ImportBatch:
    """Join barrier for one multi-file import

    Results are added as they settle (in any order). Once every expected file
    has settled, on_complete is called exactly once with the successful images
    in completion order. Failed files are dropped and never hold the batch up.

    Args:
        expected: Number of files in the batch
        on_complete: Callback receiving List[DecodedImage]
    """

    def __init__(self, expected: int, on_complete: Callable[[List[DecodedImage]], None]):
        self.expected = expected
        self.on_complete = on_complete
        self.images: List[DecodedImage] = []
        self.failures: List[DecodeResult] = []
        self.settled = 0
        self.completed = False

        if expected <= 0:
            # Nothing to wait for and nothing to commit
            self.completed = True

    def add_result(self, result: DecodeResult):
        if self.completed:
            raise RuntimeError("Import batch already completed")

        if result.ok:
            self.images.append(result.image)
        else:
            self.failures.append(result)
        self.settled += 1

        if self.settled >= self.expected:
            self.completed = True
            logger.info(f"Import batch settled: {len(self.images)} decoded, {len(self.failures)} failed")
            self.on_complete(list(self.images))
