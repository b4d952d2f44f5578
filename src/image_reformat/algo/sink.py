"""Write an encoded image to a file or to memory."""

from io import BytesIO
from pathlib import Path

from loguru import logger

from ..common.config import ReformatConfig
from ..common.errors import WriteFailure
from ..common.schemas import Encoding, ImageBuffer
from ..utils.output_path import derive_output_path
from .format_selector import is_encodable


def _assert_encodable(img: ImageBuffer, encoding: Encoding) -> None:
    assert is_encodable(img, encoding), (
        f"{img.mode} buffer cannot be written as {encoding}; call prepare_for_encoding first"
    )


def _save_kwargs(encoding: Encoding) -> dict[str, object]:
    if encoding == Encoding.PNG:
        return {"optimize": True}
    if encoding == Encoding.WEBP:
        return {"lossless": True}
    return {}


def write_to_file(img: ImageBuffer, encoding: Encoding, path: str | Path) -> Path:
    """Encode ``img`` to ``path``.

    A failed write is not cleaned up; whatever was flushed stays on disk.

    Raises:
        WriteFailure: On any I/O or encoder error.
    """
    _assert_encodable(img, encoding)
    output_path = Path(path)

    # Ensure parent directory still exists (it was checked during validation)
    if not output_path.parent.is_dir():
        raise WriteFailure(str(output_path), f"directory {output_path.parent} does not exist")

    try:
        img.image.save(output_path, format=encoding.pil_format, **_save_kwargs(encoding))
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to save {output_path}: {exc}")
        raise WriteFailure(str(output_path), str(exc)) from exc

    logger.info(f"Wrote {img.width}x{img.height} {encoding} to {output_path}")
    return output_path


def write_to_buffer(img: ImageBuffer, encoding: Encoding) -> bytes:
    """Encode ``img`` in memory and return the bytes."""
    _assert_encodable(img, encoding)

    out = BytesIO()
    img.image.save(out, format=encoding.pil_format, **_save_kwargs(encoding))
    return out.getvalue()


class FileSink:
    """File sink bound to a configured output directory."""

    def __init__(self, config: ReformatConfig):
        self.output_dir: Path = config.output_dir
        self.suffix: str = config.output_suffix

    def output_path_for(self, source: str, extension: str | None = None) -> Path:
        return derive_output_path(
            source,
            self.output_dir,
            suffix=self.suffix,
            extension=extension,
        )
