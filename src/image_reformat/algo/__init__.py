"""Pipeline stages."""

from .acquirer import acquire, decode_bytes, fetch_bytes, read_local_bytes
from .dimensions import resolve_dimensions
from .format_selector import default_encoding_for, parse_format, prepare_for_encoding, select_encoding
from .sink import FileSink, write_to_buffer, write_to_file
from .transformer import compress, resample, transform
from .validator import check_output_path, check_quality, classify

__all__ = [
    "acquire",
    "decode_bytes",
    "fetch_bytes",
    "read_local_bytes",
    "resolve_dimensions",
    "default_encoding_for",
    "parse_format",
    "prepare_for_encoding",
    "select_encoding",
    "FileSink",
    "write_to_buffer",
    "write_to_file",
    "compress",
    "resample",
    "transform",
    "check_output_path",
    "check_quality",
    "classify",
]
