from pathlib import Path, PurePosixPath
from urllib.parse import urlsplit


def source_filename(source: str) -> str:
    """Last path segment of a local path or URL ("" when there is none)."""
    if "://" in source:
        return PurePosixPath(urlsplit(source).path).name
    return Path(source).name


def derive_output_path(
    source: str,
    output_dir: str | Path,
    *,
    suffix: str = "_formatted",
    extension: str | None = None,
) -> Path:
    """Build ``<output_dir>/<stem><suffix>.<ext>`` for a source.

    ``extension`` overrides the source's own extension; it is also used
    when the source name has none. Sources without any usable name become
    ``image<suffix>``.

    Examples:
        >>> derive_output_path("photos/cat.png", "out")
        PosixPath('out/cat_formatted.png')
        >>> derive_output_path("https://example.com/a/dog.jpeg?s=1", "out", extension="png")
        PosixPath('out/dog_formatted.png')
    """
    name = PurePosixPath(source_filename(source) or "image")
    stem = name.stem or "image"
    ext = extension or name.suffix.lstrip(".")

    filename = f"{stem}{suffix}.{ext}" if ext else f"{stem}{suffix}"
    return Path(output_dir) / filename
