"""Test data factories and FLV byte builders."""

import struct
from typing import Iterable, Optional

import factory

from flv_reader.domain import (
    AudioTagBody,
    AudioTagHeader,
    ScriptTagBody,
    SoundFormat,
    SoundRate,
    SoundSize,
    SoundType,
    Tag,
    TagHeader,
    TagType,
    VideoCodec,
    VideoFrameType,
    VideoTagBody,
    VideoTagHeader,
)


def build_file_header(
    version: int = 1,
    type_flags: int = 0x05,
    data_offset: int = 9,
    signature: bytes = b"FLV",
) -> bytes:
    """Create a 9-byte FLV file header."""
    return signature + struct.pack(">BBI", version, type_flags, data_offset)


def build_tag_header(
    tag_type: int, data_size: int, timestamp: int = 0, stream_id: int = 0
) -> bytes:
    """Create an 11-byte tag header; ``timestamp`` may be negative (SI32)."""
    ts = timestamp & 0xFFFFFFFF
    return (
        bytes([tag_type])
        + data_size.to_bytes(3, "big")
        + (ts & 0xFFFFFF).to_bytes(3, "big")
        + bytes([ts >> 24])
        + stream_id.to_bytes(3, "big")
    )


def build_tag(tag_type: int, body: bytes, timestamp: int = 0, stream_id: int = 0) -> bytes:
    return build_tag_header(tag_type, len(body), timestamp, stream_id) + body


def build_stream(tags: Iterable[bytes], header: Optional[bytes] = None) -> bytes:
    """Create a complete FLV stream with correct PreviousTagSize markers."""
    data = bytearray(header if header is not None else build_file_header())
    data.extend(struct.pack(">I", 0))
    for tag in tags:
        data.extend(tag)
        data.extend(struct.pack(">I", len(tag)))
    return bytes(data)


def encode_tag(tag: Tag) -> bytes:
    """Serialize a ``Tag`` model back to its wire bytes."""
    body = tag.body
    if isinstance(body, AudioTagBody):
        h = body.header
        first = (
            (h.sound_format.value << 4)
            | (h.sound_rate.value << 2)
            | (h.sound_size.value << 1)
            | h.sound_type.value
        )
        raw = bytes([first]) + body.payload
    elif isinstance(body, VideoTagBody):
        h = body.header
        raw = bytes([(h.frame_type.value << 4) | h.codec_id.value]) + body.payload
    else:
        raw = body.payload
    return build_tag(tag.header.tag_type.value, raw, tag.header.timestamp)


class AudioTagHeaderFactory(factory.Factory):
    """Factory for audio tag headers cycling through every value."""

    class Meta:
        model = AudioTagHeader

    sound_format = factory.Iterator(list(SoundFormat))
    sound_rate = factory.Iterator(list(SoundRate))
    sound_size = factory.Iterator(list(SoundSize))
    sound_type = factory.Iterator(list(SoundType))


class VideoTagHeaderFactory(factory.Factory):
    """Factory for video tag headers cycling through every value."""

    class Meta:
        model = VideoTagHeader

    frame_type = factory.Iterator(list(VideoFrameType))
    codec_id = factory.Iterator(list(VideoCodec))


class AudioTagBodyFactory(factory.Factory):
    class Meta:
        model = AudioTagBody

    header = factory.SubFactory(AudioTagHeaderFactory)
    payload = factory.Faker("binary", length=32)


class VideoTagBodyFactory(factory.Factory):
    class Meta:
        model = VideoTagBody

    header = factory.SubFactory(VideoTagHeaderFactory)
    payload = factory.Faker("binary", length=64)


class ScriptTagBodyFactory(factory.Factory):
    class Meta:
        model = ScriptTagBody

    payload = factory.Faker("binary", length=24)


class AudioTagFactory(factory.Factory):
    """Factory for complete audio tags with a consistent data size."""

    class Meta:
        model = Tag

    class Params:
        timestamp = factory.Faker("pyint", min_value=0, max_value=0x7FFFFFFF)

    body = factory.SubFactory(AudioTagBodyFactory)
    header = factory.LazyAttribute(
        lambda o: TagHeader(
            tag_type=TagType.AUDIO,
            data_size=len(o.body.payload) + 1,
            timestamp=o.timestamp,
        )
    )


class VideoTagFactory(factory.Factory):
    """Factory for complete video tags with a consistent data size."""

    class Meta:
        model = Tag

    class Params:
        timestamp = factory.Faker("pyint", min_value=0, max_value=0x7FFFFFFF)

    body = factory.SubFactory(VideoTagBodyFactory)
    header = factory.LazyAttribute(
        lambda o: TagHeader(
            tag_type=TagType.VIDEO,
            data_size=len(o.body.payload) + 1,
            timestamp=o.timestamp,
        )
    )


class ScriptTagFactory(factory.Factory):
    """Factory for script data tags."""

    class Meta:
        model = Tag

    class Params:
        timestamp = 0

    body = factory.SubFactory(ScriptTagBodyFactory)
    header = factory.LazyAttribute(
        lambda o: TagHeader(
            tag_type=TagType.SCRIPT,
            data_size=len(o.body.payload),
            timestamp=o.timestamp,
        )
    )
