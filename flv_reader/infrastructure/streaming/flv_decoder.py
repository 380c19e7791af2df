"""Incremental decoder for the body of an FLV stream.

The body of an FLV file (everything after the 9-byte file header) is a
sequence of ``PreviousTagSize`` markers alternating with tags::

    PreviousTagSize0 | Tag1 | PreviousTagSize1 | Tag2 | ...

``decode_step`` is a pure function from (state, buffered bytes) to a
``DecodeResult``. It emits at most one record, and only once every byte of
that record is buffered; otherwise it consumes nothing so the caller can
append more bytes and retry. ``FLVBodyDecoder`` wraps it around a mutable
``bytearray`` owned by the caller.
"""

import struct
from typing import Optional, Union

from flv_reader.domain.enums import DecoderState
from flv_reader.domain.models import (
    PREVIOUS_TAG_SIZE_SIZE,
    TAG_HEADER_SIZE,
    DecodeResult,
    PreviousTagSize,
    Record,
    Tag,
)
from flv_reader.infrastructure.streaming.tag_decoder import (
    decode_tag_body,
    decode_tag_header,
)

Buffer = Union[bytes, bytearray, memoryview]


def decode_step(state: DecoderState, buffer: Buffer) -> DecodeResult:
    """Try to decode one record from the front of ``buffer``.

    ``buffer`` is never modified. On success the result carries the next
    state and the number of bytes the record occupied.

    Raises:
        InvalidTagHeaderError: If a tag header's stream id is not zero
        EmptyMediaTagError: If an audio/video tag has an empty body
        InvalidBitfieldError: If an audio/video header byte is invalid
    """
    if state is DecoderState.AWAITING_PREVIOUS_TAG_SIZE:
        if len(buffer) < PREVIOUS_TAG_SIZE_SIZE:
            return DecodeResult(state=state)

        value: int = struct.unpack(">I", bytes(buffer[:PREVIOUS_TAG_SIZE_SIZE]))[0]
        return DecodeResult(
            state=DecoderState.AWAITING_TAG,
            consumed=PREVIOUS_TAG_SIZE_SIZE,
            record=PreviousTagSize(value),
        )

    if len(buffer) < TAG_HEADER_SIZE:
        return DecodeResult(state=state)

    # Re-derived on every attempt; nothing is cached while the body is pending.
    header = decode_tag_header(buffer[:TAG_HEADER_SIZE])
    tag_size = TAG_HEADER_SIZE + header.data_size
    if len(buffer) < tag_size:
        return DecodeResult(state=state)

    body = decode_tag_body(header, bytes(buffer[TAG_HEADER_SIZE:tag_size]))
    return DecodeResult(
        state=DecoderState.AWAITING_PREVIOUS_TAG_SIZE,
        consumed=tag_size,
        record=Tag(header=header, body=body),
    )


class FLVBodyDecoder:
    """Stateful decoder over a caller-owned pending-byte buffer."""

    def __init__(self, state: DecoderState = DecoderState.AWAITING_PREVIOUS_TAG_SIZE):
        self.state = state

    def decode(self, buffer: bytearray) -> Optional[Record]:
        """Decode one record and remove its bytes from the front of ``buffer``.

        Returns:
            The decoded record, or None if more bytes are needed. In the
            latter case ``buffer`` is left exactly as it was.
        """
        result = decode_step(self.state, buffer)
        if result.record is None:
            return None

        del buffer[: result.consumed]
        self.state = result.state
        return result.record

    def reset(self) -> None:
        self.state = DecoderState.AWAITING_PREVIOUS_TAG_SIZE
