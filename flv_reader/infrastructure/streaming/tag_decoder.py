"""FLV tag header decoding and tag body dispatch."""

import struct

from flv_reader.domain.enums import DecoderState, TagType
from flv_reader.domain.exceptions import (
    EmptyMediaTagError,
    InvalidTagHeaderError,
    TruncatedTagError,
)
from flv_reader.domain.models import (
    TAG_HEADER_SIZE,
    AnyTagType,
    AudioTagBody,
    ReservedTagBody,
    ReservedTagType,
    ScriptTagBody,
    TagBody,
    TagHeader,
    VideoTagBody,
)
from flv_reader.infrastructure.streaming.bitfields import (
    decode_audio_tag_header,
    decode_video_tag_header,
)

_STREAM_ID_ZERO = b"\x00\x00\x00"


def decode_tag_type(byte: int) -> AnyTagType:
    """Map a tag type byte to ``TagType``, or ``ReservedTagType`` for the rest."""
    try:
        return TagType(byte)
    except ValueError:
        return ReservedTagType(byte)


def decode_tag_header(data: bytes) -> TagHeader:
    """Decode the 11-byte tag header at the start of ``data``.

    Layout: type (1), data size (UI24), timestamp (UI24), timestamp
    extension (UI8), stream id (UI24, always 0). The extension byte is the
    upper 8 bits of a signed 32-bit timestamp in milliseconds.

    Raises:
        TruncatedTagError: If fewer than 11 bytes are given
        InvalidTagHeaderError: If the stream id bytes are not all zero
    """
    if len(data) < TAG_HEADER_SIZE:
        raise TruncatedTagError(len(data), DecoderState.AWAITING_TAG)

    raw = bytes(data[:TAG_HEADER_SIZE])
    if raw[8:11] != _STREAM_ID_ZERO:
        raise InvalidTagHeaderError(raw)

    tag_type = decode_tag_type(raw[0])
    data_size: int = struct.unpack(">I", b"\x00" + raw[1:4])[0]
    timestamp: int = struct.unpack(">i", raw[7:8] + raw[4:7])[0]

    return TagHeader(tag_type=tag_type, data_size=data_size, timestamp=timestamp)


def decode_tag_body(header: TagHeader, body: bytes) -> TagBody:
    """Parse a complete tag body according to the header's tag type.

    Audio and video bodies have their first byte decoded by the bitfield
    sub-decoders; script and reserved bodies are passed through as is.

    Raises:
        EmptyMediaTagError: If an audio or video body has no bytes
        InvalidBitfieldError: If the audio/video header byte is invalid
    """
    if header.tag_type is TagType.AUDIO:
        if not body:
            raise EmptyMediaTagError(header.tag_type)
        return AudioTagBody(header=decode_audio_tag_header(body[0]), payload=bytes(body[1:]))

    if header.tag_type is TagType.VIDEO:
        if not body:
            raise EmptyMediaTagError(header.tag_type)
        return VideoTagBody(header=decode_video_tag_header(body[0]), payload=bytes(body[1:]))

    if header.tag_type is TagType.SCRIPT:
        return ScriptTagBody(payload=bytes(body))

    return ReservedTagBody(payload=bytes(body))
