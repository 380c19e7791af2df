"""Bitfield sub-decoders for audio and video tag header bytes.

Each function takes the whole header byte, masks out its own field and
returns the matching enum member, or raises the field's own error.
"""

from flv_reader.domain.enums import (
    SoundFormat,
    SoundRate,
    SoundSize,
    SoundType,
    VideoCodec,
    VideoFrameType,
)
from flv_reader.domain.exceptions import (
    InvalidCodecIdError,
    InvalidFrameTypeError,
    InvalidSoundFormatError,
    InvalidSoundRateError,
    InvalidSoundSizeError,
    InvalidSoundTypeError,
)
from flv_reader.domain.models import AudioTagHeader, VideoTagHeader


def decode_sound_format(byte: int) -> SoundFormat:
    value = (byte & 0xF0) >> 4
    try:
        return SoundFormat(value)
    except ValueError:
        raise InvalidSoundFormatError(value) from None


def decode_sound_rate(byte: int) -> SoundRate:
    value = (byte & 0x0C) >> 2
    try:
        return SoundRate(value)
    except ValueError:
        raise InvalidSoundRateError(value) from None


def decode_sound_size(byte: int) -> SoundSize:
    value = (byte & 0x02) >> 1
    try:
        return SoundSize(value)
    except ValueError:
        raise InvalidSoundSizeError(value) from None


def decode_sound_type(byte: int) -> SoundType:
    value = byte & 0x01
    try:
        return SoundType(value)
    except ValueError:
        raise InvalidSoundTypeError(value) from None


def decode_frame_type(byte: int) -> VideoFrameType:
    value = (byte & 0xF0) >> 4
    try:
        return VideoFrameType(value)
    except ValueError:
        raise InvalidFrameTypeError(value) from None


def decode_codec_id(byte: int) -> VideoCodec:
    value = byte & 0x0F
    try:
        return VideoCodec(value)
    except ValueError:
        raise InvalidCodecIdError(value) from None


def decode_audio_tag_header(byte: int) -> AudioTagHeader:
    """Decode the first byte of an audio tag body.

    Raises:
        InvalidSoundFormatError: If bits 7-4 hold 12 or 13
    """
    return AudioTagHeader(
        sound_format=decode_sound_format(byte),
        sound_rate=decode_sound_rate(byte),
        sound_size=decode_sound_size(byte),
        sound_type=decode_sound_type(byte),
    )


def decode_video_tag_header(byte: int) -> VideoTagHeader:
    """Decode the first byte of a video tag body.

    Raises:
        InvalidFrameTypeError: If bits 7-4 are outside 1-5
        InvalidCodecIdError: If bits 3-0 are outside 1-7
    """
    return VideoTagHeader(
        frame_type=decode_frame_type(byte),
        codec_id=decode_codec_id(byte),
    )
