"""Common module - errors, schemas and configuration."""

from .config import ReformatConfig
from .errors import (
    DecodeFailure,
    ErrorCategory,
    ErrorKind,
    ImageRuntimeError,
    ImageToolError,
    InputValidationError,
    InvalidDimensions,
    InvalidOutputPath,
    InvalidQuality,
    InvalidSource,
    MissingOutputPath,
    SourceUnreachable,
    WriteFailure,
)
from .schemas import (
    Encoding,
    ImageBuffer,
    LocalPath,
    OutputDescriptor,
    ReformatOutput,
    ReformatParams,
    RemoteUrl,
    ResizeTarget,
    SinkKind,
    SourceLocator,
)

__all__ = [
    "ReformatConfig",
    "DecodeFailure",
    "ErrorCategory",
    "ErrorKind",
    "ImageRuntimeError",
    "ImageToolError",
    "InputValidationError",
    "InvalidDimensions",
    "InvalidOutputPath",
    "InvalidQuality",
    "InvalidSource",
    "MissingOutputPath",
    "SourceUnreachable",
    "WriteFailure",
    "Encoding",
    "ImageBuffer",
    "LocalPath",
    "OutputDescriptor",
    "ReformatOutput",
    "ReformatParams",
    "RemoteUrl",
    "ResizeTarget",
    "SinkKind",
    "SourceLocator",
]
