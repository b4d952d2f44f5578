from .media_types import ColorModel, MediaType, determine_mime, is_url_shaped
from .output_path import derive_output_path, source_filename
from .profiling import timed_stage

__all__ = [
    "ColorModel",
    "MediaType",
    "determine_mime",
    "is_url_shaped",
    "derive_output_path",
    "source_filename",
    "timed_stage",
]
