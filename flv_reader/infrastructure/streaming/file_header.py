"""FLV file header parser."""

import logging
import struct

from flv_reader.domain.exceptions import MalformedSignatureError, TruncatedHeaderError
from flv_reader.domain.models import FILE_HEADER_SIZE, FileHeader

logger = logging.getLogger(__name__)

FLV_SIGNATURE = b"FLV"


def parse_file_header(data: bytes) -> FileHeader:
    """Parse the fixed 9-byte FLV file header.

    Only the first 9 bytes of ``data`` are examined.

    Args:
        data: Bytes from the very start of the stream

    Returns:
        FileHeader: Version, raw type flags and data offset

    Raises:
        TruncatedHeaderError: If fewer than 9 bytes are given
        MalformedSignatureError: If the stream does not start with ``FLV``
    """
    if len(data) < FILE_HEADER_SIZE:
        raise TruncatedHeaderError(len(data), FILE_HEADER_SIZE)

    signature, version, type_flags, data_offset = struct.unpack(
        ">3sBBI", bytes(data[:FILE_HEADER_SIZE])
    )
    if signature != FLV_SIGNATURE:
        raise MalformedSignatureError(signature)

    header = FileHeader(version=version, type_flags=type_flags, data_offset=data_offset)
    logger.debug(
        f"Parsed FLV header: version={version}, audio={header.has_audio}, "
        f"video={header.has_video}, data_offset={data_offset}"
    )
    return header
