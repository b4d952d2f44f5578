import re
from enum import StrEnum

import magic

URL_PATTERN = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._\+~#=]{2,256}(\.[a-z]{2,4})?\b([-a-zA-Z0-9@:%_\+.~#?&//=]*)"
)


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str) -> "MediaType":
        if file_type.startswith("image"):
            return MediaType.IMAGE
        elif file_type.startswith("video"):
            return MediaType.VIDEO
        elif file_type.startswith("audio"):
            return MediaType.AUDIO
        elif file_type.startswith("text"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


class ColorModel(StrEnum):
    """Pixel layout of a decoded image."""

    L8 = "L8"
    LA8 = "LA8"
    L16 = "L16"
    LA16 = "LA16"
    RGB8 = "RGB8"
    RGBA8 = "RGBA8"
    RGB16 = "RGB16"
    RGBA16 = "RGBA16"
    L32F = "L32F"
    RGB32F = "RGB32F"
    RGBA32F = "RGBA32F"
    OTHER = "other"

    @classmethod
    def from_pil_mode(cls, mode: str) -> "ColorModel":
        return _PIL_MODES.get(mode, ColorModel.OTHER)

    @property
    def is_float(self) -> bool:
        return self in (ColorModel.L32F, ColorModel.RGB32F, ColorModel.RGBA32F)

    @property
    def has_alpha(self) -> bool:
        return self in (
            ColorModel.LA8,
            ColorModel.LA16,
            ColorModel.RGBA8,
            ColorModel.RGBA16,
            ColorModel.RGBA32F,
        )


# "I" is Pillow's 32-bit signed integer mode; PNG decodes 16-bit grayscale into it.
_PIL_MODES: dict[str, ColorModel] = {
    "1": ColorModel.L8,
    "L": ColorModel.L8,
    "P": ColorModel.RGB8,
    "LA": ColorModel.LA8,
    "La": ColorModel.LA8,
    "I;16": ColorModel.L16,
    "I;16B": ColorModel.L16,
    "I;16L": ColorModel.L16,
    "I;16N": ColorModel.L16,
    "I": ColorModel.L16,
    "RGB": ColorModel.RGB8,
    "RGBA": ColorModel.RGBA8,
    "RGBa": ColorModel.RGBA8,
    "F": ColorModel.L32F,
}


def is_url_shaped(text: str) -> bool:
    """Return True when ``text`` starts with an http(s) URL."""
    return bool(URL_PATTERN.match(text))


def determine_mime(data: bytes) -> str:
    """Sniff the MIME type of ``data`` from its content."""
    mime = magic.Magic(mime=True)

    file_type = mime.from_buffer(data)
    if not file_type:
        file_type = "application/octet-stream"
    return file_type
