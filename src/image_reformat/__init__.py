"""image_reformat - resize or compress images from a path or URL."""

from .common.config import ReformatConfig
from .common.errors import (
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
from .common.schemas import Encoding, ImageBuffer, ReformatOutput, ReformatParams, SinkKind
from .pipeline import ReformatPipeline, run_pipeline

__version__ = "0.1.0"

__all__ = [
    "ReformatConfig",
    "ReformatParams",
    "ReformatOutput",
    "ReformatPipeline",
    "run_pipeline",
    "Encoding",
    "ImageBuffer",
    "SinkKind",
    "ErrorCategory",
    "ErrorKind",
    "ImageToolError",
    "InputValidationError",
    "ImageRuntimeError",
    "InvalidSource",
    "InvalidQuality",
    "InvalidOutputPath",
    "MissingOutputPath",
    "SourceUnreachable",
    "DecodeFailure",
    "WriteFailure",
    "InvalidDimensions",
    "__version__",
]
