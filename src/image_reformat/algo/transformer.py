"""Resize and quality compression.

Resampling is always nearest-neighbor: each output pixel takes the value of
one source pixel, with no blending.
"""

from loguru import logger
from PIL import Image

from ..common.errors import InvalidDimensions, InvalidQuality
from ..common.schemas import ImageBuffer, QualityLevel, ResizeTarget
from ..utils.profiling import timed_stage
from .dimensions import resolve_dimensions
from .validator import MAX_QUALITY, MIN_QUALITY

RESAMPLING = Image.Resampling.NEAREST


def resample(img: ImageBuffer, target_w: int, target_h: int) -> ImageBuffer:
    """Return a new ``target_w`` x ``target_h`` buffer in the same mode.

    Raises:
        InvalidDimensions: If either target dimension is 0 or negative.
    """
    if target_w <= 0 or target_h <= 0:
        raise InvalidDimensions(target_w, target_h)

    logger.debug(f"Resampling {img.width}x{img.height} -> {target_w}x{target_h} ({img.mode})")
    resized = img.image.resize((target_w, target_h), RESAMPLING)
    return img.replace(resized)


def compress(img: ImageBuffer, quality: QualityLevel) -> ImageBuffer:
    """Scale both sides by ``quality`` percent (floor), keeping the aspect ratio.

    ``quality == 100`` returns an unmodified copy without resampling.

    Raises:
        InvalidQuality: If ``quality`` is outside [1, 100].
        InvalidDimensions: If a scaled side drops to 0.
    """
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidQuality(quality)

    if quality == MAX_QUALITY:
        return img.replace(img.image.copy())

    target_w = img.width * quality // 100
    target_h = img.height * quality // 100
    return resample(img, target_w, target_h)


@timed_stage("transform")
def transform(
    img: ImageBuffer,
    requested: ResizeTarget | None = None,
    quality: int | None = None,
) -> ImageBuffer:
    """Apply an explicit resize, a quality compression, or nothing.

    An explicit size wins over ``quality``.
    """
    if requested is not None and not requested.is_empty:
        if quality is not None:
            logger.info(f"Explicit size given, ignoring quality={quality}")
        target_w, target_h = resolve_dimensions(img.size, requested)
        return resample(img, target_w, target_h)

    if quality is not None:
        return compress(img, quality)

    logger.debug("No resize requested, keeping original size")
    return img.replace(img.image.copy())
