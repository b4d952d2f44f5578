"""Fill in a missing target dimension from the original aspect ratio."""

from ..common.schemas import ResizeTarget


def resolve_dimensions(original: tuple[int, int], requested: ResizeTarget) -> tuple[int, int]:
    """
    Compute a concrete (width, height) for an explicit resize.

    - height missing: height = original_height * width // original_width
    - width missing:  width = original_width * height // original_height
    - both given:     used as is, aspect ratio is not preserved

    Floor division can produce 0 for very small targets; the resampler
    rejects that case, as it does an explicit 0. A target with both sides
    missing resolves to the original size.

    Args:
        original: Source (width, height), both > 0
        requested: Partially specified target size

    Returns:
        Target (width, height)
    """
    original_w, original_h = original
    target_w, target_h = requested.width, requested.height

    # An explicit 0 is kept; the resampler rejects it.
    if target_w is None and target_h is None:
        return original
    if target_h is None:
        target_h = original_h * target_w // original_w
    elif target_w is None:
        target_w = original_w * target_h // original_h

    return target_w, target_h
