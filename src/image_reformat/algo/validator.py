"""Input validation: source classification, quality range and output path checks.

All checks here are pure with respect to the pipeline: they only look at the
string or the filesystem and never read image data.
"""

from pathlib import Path

from loguru import logger

from ..common.errors import InvalidOutputPath, InvalidQuality, InvalidSource, MissingOutputPath
from ..common.schemas import LocalPath, QualityLevel, RemoteUrl, SourceLocator
from ..utils.media_types import is_url_shaped

MIN_QUALITY = 1
MAX_QUALITY = 100


def classify(source: str) -> SourceLocator:
    """Classify ``source`` as a remote URL or an existing local file.

    Both checks run independently. A string that is URL-shaped and also names
    a local file is treated as a URL.

    Raises:
        InvalidSource: If ``source`` is neither.
    """
    url_shaped = is_url_shaped(source)
    local_file = Path(source).is_file()

    if url_shaped:
        if local_file:
            logger.warning(f"'{source}' is both a URL and a local file; using the URL")
        return RemoteUrl(url=source)

    if local_file:
        return LocalPath(path=Path(source))

    raise InvalidSource(source)


def check_quality(quality: int | None) -> QualityLevel | None:
    """Return ``quality`` unchanged when absent or within [1, 100].

    Raises:
        InvalidQuality: If ``quality`` is present and out of range (bools are rejected too).
    """
    if quality is None:
        return None

    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidQuality(quality)

    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidQuality(quality)

    return quality


def check_output_path(path: str | Path) -> Path:
    """Check that ``path`` is non-empty and its parent directory exists.

    Raises:
        MissingOutputPath: If ``path`` is empty.
        InvalidOutputPath: If the parent directory does not exist.
    """
    if not str(path):
        raise MissingOutputPath()

    output_path = Path(path)
    parent = output_path.parent

    if not parent.is_dir():
        raise InvalidOutputPath(str(path))

    return output_path
