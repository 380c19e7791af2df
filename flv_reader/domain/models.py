"""FLV structural records.

These are the values the decoder emits: one ``FileHeader`` per stream,
followed by alternating ``PreviousTagSize`` and ``Tag`` records.
"""

from dataclasses import dataclass
from typing import Optional, Union

from flv_reader.domain.enums import (
    DecoderState,
    SoundFormat,
    SoundRate,
    SoundSize,
    SoundType,
    TagType,
    VideoCodec,
    VideoFrameType,
)

FILE_HEADER_SIZE = 9
PREVIOUS_TAG_SIZE_SIZE = 4
TAG_HEADER_SIZE = 11


@dataclass(frozen=True)
class FileHeader:
    """FLV file header information."""

    version: int
    type_flags: int
    data_offset: int

    @property
    def has_audio(self) -> bool:
        return bool(self.type_flags & 0x04)

    @property
    def has_video(self) -> bool:
        return bool(self.type_flags & 0x01)


@dataclass(frozen=True)
class ReservedTagType:
    """Tag type byte outside the known set, kept raw for diagnostics."""

    value: int

    @property
    def name(self) -> str:
        return f"RESERVED({self.value})"

    def __str__(self) -> str:
        return self.name


AnyTagType = Union[TagType, ReservedTagType]


@dataclass(frozen=True)
class TagHeader:
    """FLV tag header information."""

    tag_type: AnyTagType
    data_size: int
    timestamp: int

    @property
    def tag_size(self) -> int:
        """Size of the whole tag (header plus body) in bytes."""
        return TAG_HEADER_SIZE + self.data_size


@dataclass(frozen=True)
class AudioTagHeader:
    sound_format: SoundFormat
    sound_rate: SoundRate
    sound_size: SoundSize
    sound_type: SoundType


@dataclass(frozen=True)
class VideoTagHeader:
    frame_type: VideoFrameType
    codec_id: VideoCodec


@dataclass(frozen=True)
class AudioTagBody:
    """Audio tag body; ``payload`` excludes the header byte."""

    header: AudioTagHeader
    payload: bytes


@dataclass(frozen=True)
class VideoTagBody:
    """Video tag body; ``payload`` excludes the header byte."""

    header: VideoTagHeader
    payload: bytes


@dataclass(frozen=True)
class ScriptTagBody:
    """Script data tag body, passed through undecoded (AMF)."""

    payload: bytes


@dataclass(frozen=True)
class ReservedTagBody:
    payload: bytes


TagBody = Union[AudioTagBody, VideoTagBody, ScriptTagBody, ReservedTagBody]


@dataclass(frozen=True)
class PreviousTagSize:
    """Size marker preceding every tag (0 before the first one)."""

    value: int


@dataclass(frozen=True)
class Tag:
    """Complete FLV tag."""

    header: TagHeader
    body: TagBody


Record = Union[PreviousTagSize, Tag]


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of one decode step.

    ``record`` is None (and ``consumed`` is 0) when the buffer does not yet
    hold enough bytes for the record expected in ``state``.
    """

    state: DecoderState
    consumed: int = 0
    record: Optional[Record] = None

    @property
    def needs_more_data(self) -> bool:
        return self.record is None
