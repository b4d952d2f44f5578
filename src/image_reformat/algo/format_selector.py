"""Choose the output encoding and make the buffer encodable in it."""

from loguru import logger

from ..common.schemas import Encoding, ImageBuffer
from ..utils.media_types import ColorModel

LOSSLESS_ENCODING = Encoding.PNG
HIGH_DYNAMIC_RANGE_ENCODING = Encoding.TIFF

_FORMAT_ALIASES: dict[str, Encoding] = {
    "jpg": Encoding.JPEG,
    "jpeg": Encoding.JPEG,
    "png": Encoding.PNG,
    "webp": Encoding.WEBP,
    "gif": Encoding.GIF,
    "bmp": Encoding.BMP,
    "tif": Encoding.TIFF,
    "tiff": Encoding.TIFF,
}

# Pillow modes each encoder writes without conversion.
ENCODABLE_MODES: dict[Encoding, frozenset[str]] = {
    Encoding.PNG: frozenset({"1", "L", "LA", "I", "I;16", "I;16B", "P", "RGB", "RGBA"}),
    Encoding.TIFF: frozenset(
        {"1", "L", "LA", "P", "RGB", "RGBA", "CMYK", "I", "I;16", "I;16B", "F"}
    ),
    Encoding.JPEG: frozenset({"L", "RGB", "CMYK"}),
    Encoding.WEBP: frozenset({"RGB", "RGBA"}),
    Encoding.GIF: frozenset({"1", "L", "P", "RGB", "RGBA"}),
    Encoding.BMP: frozenset({"1", "L", "P", "RGB", "RGBA"}),
}


def parse_format(name: str | None) -> Encoding | None:
    """Map a format name (case-insensitive, leading dot allowed) to an Encoding."""
    if not name:
        return None
    return _FORMAT_ALIASES.get(name.strip().lstrip(".").lower())


def default_encoding_for(color_model: ColorModel) -> Encoding:
    if color_model.is_float:
        return HIGH_DYNAMIC_RANGE_ENCODING
    return LOSSLESS_ENCODING


def select_encoding(img: ImageBuffer, requested: str | None = None) -> Encoding:
    """Use ``requested`` when supported, otherwise derive from the color model."""
    encoding = parse_format(requested)
    if encoding is not None:
        return encoding

    if requested:
        logger.warning(f"Unsupported format '{requested}', choosing from color model")

    encoding = default_encoding_for(img.color_model)
    logger.debug(f"{img.color_model} -> {encoding}")
    return encoding


def is_encodable(img: ImageBuffer, encoding: Encoding) -> bool:
    return img.mode in ENCODABLE_MODES[encoding]


def prepare_for_encoding(img: ImageBuffer, encoding: Encoding) -> ImageBuffer:
    """Convert ``img`` to a mode ``encoding`` can carry, if it cannot already.

    Conversions are explicit and logged: alpha is dropped for JPEG, high bit
    depths are reduced to 8 bits for encoders without 16-bit support.
    """
    if is_encodable(img, encoding):
        return img

    model = img.color_model
    grayscale = model in (ColorModel.L8, ColorModel.LA8, ColorModel.L16, ColorModel.LA16, ColorModel.L32F)
    if img.mode.startswith("I") or img.mode == "F":
        if img.mode.startswith("I"):
            # 16-bit samples scaled down to 8 bits
            reduced = img.image.convert("I").point(lambda v: v * (1 / 256)).convert("L")
        else:
            reduced = img.image.convert("L")
        img = img.replace(reduced)
        if is_encodable(img, encoding):
            logger.info(f"Reduced {model} to 8-bit grayscale for {encoding}")
            return img

    if encoding == Encoding.JPEG:
        target_mode = "L" if grayscale else "RGB"
    elif model.has_alpha:
        target_mode = "RGBA"
    else:
        target_mode = "RGB"

    logger.info(f"Converting {img.mode} to {target_mode} for {encoding}")
    return img.replace(img.image.convert(target_mode))
