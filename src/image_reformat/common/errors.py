"""
Error taxonomy for the reformat pipeline.

Two kinds of failure are distinguished:

- InputValidationError: the caller supplied unusable input. Raised before any
  I/O or decode work begins.
- ImageRuntimeError: the request was well-formed but failed while running
  (unreachable source, undecodable bytes, failed write, degenerate resize).

Every concrete error carries an ``ErrorKind`` tag so the CLI and HTTP surfaces
can name the failure without inspecting the class hierarchy.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, override


class ErrorCategory(StrEnum):
    VALIDATION = "validation"
    RUNTIME = "runtime"


class ErrorKind(StrEnum):
    INVALID_SOURCE = "InvalidSource"
    INVALID_QUALITY = "InvalidQuality"
    INVALID_OUTPUT_PATH = "InvalidOutputPath"
    MISSING_OUTPUT_PATH = "MissingOutputPath"
    SOURCE_UNREACHABLE = "SourceUnreachable"
    DECODE_FAILURE = "DecodeFailure"
    WRITE_FAILURE = "WriteFailure"
    INVALID_DIMENSIONS = "InvalidDimensions"


class ImageToolError(Exception):
    """Base class for every failure surfaced by the pipeline."""

    kind: ClassVar[ErrorKind]
    category: ClassVar[ErrorCategory]

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)

    @override
    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class InputValidationError(ImageToolError):
    """Caller supplied input the pipeline cannot use."""

    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION


class InvalidSource(InputValidationError):
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_SOURCE

    def __init__(self, source: str):
        self.source: str = source
        super().__init__(f"'{source}' is neither an existing file nor a URL")


class InvalidQuality(InputValidationError):
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_QUALITY

    def __init__(self, quality: object):
        self.quality: object = quality
        super().__init__(f"quality must be an integer between 1 and 100, got {quality!r}")


class InvalidOutputPath(InputValidationError):
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_OUTPUT_PATH

    def __init__(self, path: str):
        self.path: str = path
        super().__init__(f"output directory does not exist for '{path}'")


class MissingOutputPath(InputValidationError):
    kind: ClassVar[ErrorKind] = ErrorKind.MISSING_OUTPUT_PATH

    def __init__(self):
        super().__init__("output path is empty")


# ---------------------------------------------------------------------------
# Runtime errors
# ---------------------------------------------------------------------------


class ImageRuntimeError(ImageToolError):
    """A well-formed request failed while executing."""

    category: ClassVar[ErrorCategory] = ErrorCategory.RUNTIME


class SourceUnreachable(ImageRuntimeError):
    kind: ClassVar[ErrorKind] = ErrorKind.SOURCE_UNREACHABLE

    def __init__(self, source: str, reason: str):
        self.source: str = source
        self.reason: str = reason
        super().__init__(f"could not read '{source}': {reason}")


class DecodeFailure(ImageRuntimeError):
    kind: ClassVar[ErrorKind] = ErrorKind.DECODE_FAILURE

    def __init__(self, source: str, reason: str):
        self.source: str = source
        self.reason: str = reason
        super().__init__(f"'{source}' is not a decodable image: {reason}")


class WriteFailure(ImageRuntimeError):
    kind: ClassVar[ErrorKind] = ErrorKind.WRITE_FAILURE

    def __init__(self, path: str, reason: str):
        self.path: str = path
        self.reason: str = reason
        super().__init__(f"failed to save '{path}': {reason}")


class InvalidDimensions(ImageRuntimeError):
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_DIMENSIONS

    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        super().__init__(f"target size {width}x{height} has a zero dimension")
