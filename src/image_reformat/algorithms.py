"""Public algorithm API for image_reformat.

The pipeline stages can be used on their own, without the CLI or HTTP
surfaces.

Example:
    Resize a decoded image by hand::

        from PIL import Image

        from image_reformat.algorithms import (
            ImageBuffer,
            ResizeTarget,
            resolve_dimensions,
            resample,
            select_encoding,
            write_to_file,
        )

        img = ImageBuffer(image=Image.open("photo.png"))
        width, height = resolve_dimensions(img.size, ResizeTarget(width=200))
        small = resample(img, width, height)
        write_to_file(small, select_encoding(small), "photo_small.png")

    Compress an image held in memory::

        from image_reformat.algorithms import compress, decode_bytes, write_to_buffer, Encoding

        img = decode_bytes(raw_bytes, "upload")
        data = write_to_buffer(compress(img, 50), Encoding.PNG)
"""

from .algo.acquirer import acquire, decode_bytes, fetch_bytes
from .algo.dimensions import resolve_dimensions
from .algo.format_selector import default_encoding_for, prepare_for_encoding, select_encoding
from .algo.sink import write_to_buffer, write_to_file
from .algo.transformer import compress, resample, transform
from .algo.validator import check_output_path, check_quality, classify
from .common.schemas import Encoding, ImageBuffer, ResizeTarget
from .utils.media_types import ColorModel

__all__ = [
    # Validation
    "classify",
    "check_quality",
    "check_output_path",
    # Acquisition
    "acquire",
    "decode_bytes",
    "fetch_bytes",
    # Sizing
    "resolve_dimensions",
    "compress",
    "resample",
    "transform",
    # Encoding and output
    "default_encoding_for",
    "select_encoding",
    "prepare_for_encoding",
    "write_to_file",
    "write_to_buffer",
    # Types
    "ColorModel",
    "Encoding",
    "ImageBuffer",
    "ResizeTarget",
]
