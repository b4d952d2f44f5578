"""Pydantic schemas for pipeline inputs, intermediate buffers and results."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated, ClassVar, Literal

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.media_types import ColorModel

# ─────────────────────────────────────────────────────────────
# Source locators
# ─────────────────────────────────────────────────────────────


class LocalPath(BaseModel):
    """An existing regular file, checked once at validation time."""

    kind: Literal["local"] = "local"
    path: Path

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def display(self) -> str:
        return str(self.path)


class RemoteUrl(BaseModel):
    """A URL-shaped source string, fetched with a single GET."""

    kind: Literal["remote"] = "remote"
    url: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def display(self) -> str:
        return self.url


SourceLocator = Annotated[LocalPath | RemoteUrl, Field(discriminator="kind")]

QualityLevel = Annotated[int, Field(ge=1, le=100)]


# ─────────────────────────────────────────────────────────────
# Resize request
# ─────────────────────────────────────────────────────────────


class ResizeTarget(BaseModel):
    """Requested output size before dimension inference."""

    width: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.width is None and self.height is None


# ─────────────────────────────────────────────────────────────
# Encodings and output
# ─────────────────────────────────────────────────────────────


class Encoding(StrEnum):
    PNG = "png"
    TIFF = "tiff"
    JPEG = "jpeg"
    WEBP = "webp"
    GIF = "gif"
    BMP = "bmp"

    @property
    def pil_format(self) -> str:
        return self.value.upper()

    @property
    def media_type(self) -> str:
        return f"image/{self.value}"

    @property
    def extension(self) -> str:
        return {"jpeg": "jpg", "tiff": "tif"}.get(self.value, self.value)


class SinkKind(StrEnum):
    FILE = "file"
    BUFFER = "buffer"


class OutputDescriptor(BaseModel):
    """Where the encoded image goes, and in which encoding."""

    sink: SinkKind
    encoding: Encoding
    path: Path | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_path_for_file_sink(self) -> "OutputDescriptor":
        if self.sink == SinkKind.FILE and self.path is None:
            raise ValueError("A file sink needs a destination path")
        return self


# ─────────────────────────────────────────────────────────────
# Decoded image
# ─────────────────────────────────────────────────────────────


class ImageBuffer(BaseModel):
    """An owned, fully decoded raster image.

    Stages never mutate a buffer in place; they return a new one.
    """

    image: Image.Image
    source: str = ""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
    )

    @model_validator(mode="after")
    def validate_non_empty(self) -> "ImageBuffer":
        if self.image.width <= 0 or self.image.height <= 0:
            raise ValueError("Decoded image has a zero dimension")
        return self

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def mode(self) -> str:
        return self.image.mode

    @property
    def color_model(self) -> ColorModel:
        return ColorModel.from_pil_mode(self.image.mode)

    def replace(self, image: Image.Image) -> "ImageBuffer":
        return ImageBuffer(image=image, source=self.source)


# ─────────────────────────────────────────────────────────────
# Pipeline params / output
# ─────────────────────────────────────────────────────────────


class ReformatParams(BaseModel):
    """One pipeline run.

    Attributes:
        source: Local path or URL (classified by the validator)
        width: Explicit target width (None = infer from height)
        height: Explicit target height (None = infer from width)
        quality: Percentage scale used when no explicit size is given
        output_path: Destination file; derived from the source when None
        target_format: Requested encoding name (png, jpg, ...)
        sink: Write to a file or return the encoded bytes
    """

    source: str
    width: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    quality: int | None = None
    output_path: str | None = None
    target_format: str | None = None
    sink: SinkKind = SinkKind.FILE


class ReformatOutput(BaseModel):
    """Result of one pipeline run."""

    width: int
    height: int
    encoding: Encoding
    media_type: str
    output_path: str | None = None
    data: bytes | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
