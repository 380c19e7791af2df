"""flv-reader: incremental FLV (Flash Video) container decoder.

Decodes an FLV byte stream, delivered in chunks of any size, into a
``FileHeader`` followed by alternating ``PreviousTagSize`` and ``Tag``
records.
"""

from flv_reader.domain import (
    FileHeader,
    FLVError,
    PreviousTagSize,
    Record,
    Tag,
    TagHeader,
)
from flv_reader.infrastructure.streaming import (
    FLVBodyDecoder,
    FLVStreamProcessor,
    decode_flv,
    decode_step,
    iter_flv,
    open_flv,
    parse_file_header,
    read_flv,
)

__version__ = "0.1.0"

__all__ = [
    "FileHeader",
    "FLVError",
    "PreviousTagSize",
    "Record",
    "Tag",
    "TagHeader",
    "FLVBodyDecoder",
    "FLVStreamProcessor",
    "decode_flv",
    "decode_step",
    "iter_flv",
    "open_flv",
    "parse_file_header",
    "read_flv",
    "__version__",
]
