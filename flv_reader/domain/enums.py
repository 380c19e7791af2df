"""Enumerations for FLV structural fields.

Values mirror the numeric codes defined by the FLV file format, so
``SoundFormat(10)`` is ``SoundFormat.AAC`` and so on.
"""

from enum import Enum


class TagType(Enum):
    """Known FLV tag types. Anything else is a ``ReservedTagType``."""

    AUDIO = 8
    VIDEO = 9
    SCRIPT = 18


class SoundFormat(Enum):
    """FLV audio codec formats (bits 7-4 of the audio header byte)."""

    LINEAR_PCM_PLATFORM_ENDIAN = 0
    ADPCM = 1
    MP3 = 2
    LINEAR_PCM_LITTLE_ENDIAN = 3
    NELLYMOSER_16_KHZ_MONO = 4
    NELLYMOSER_8_KHZ_MONO = 5
    NELLYMOSER = 6
    G711_A_LAW = 7
    G711_MU_LAW = 8
    RESERVED = 9
    AAC = 10
    SPEEX = 11
    MP3_8_KHZ = 14
    DEVICE_SPECIFIC = 15


class SoundRate(Enum):
    """FLV audio sample rates (bits 3-2)."""

    RATE_5_5_KHZ = 0
    RATE_11_KHZ = 1
    RATE_22_KHZ = 2
    RATE_44_KHZ = 3


class SoundSize(Enum):
    """FLV audio sample sizes (bit 1)."""

    BITS_8 = 0
    BITS_16 = 1


class SoundType(Enum):
    """FLV audio channel configuration (bit 0)."""

    MONO = 0
    STEREO = 1


class VideoFrameType(Enum):
    """FLV video frame types (bits 7-4 of the video header byte)."""

    KEY_FRAME = 1
    INTER_FRAME = 2
    DISPOSABLE_INTER_FRAME = 3
    GENERATED_KEY_FRAME = 4
    VIDEO_INFO_COMMAND = 5


class VideoCodec(Enum):
    """FLV video codec ids (bits 3-0)."""

    JPEG = 1
    SORENSON_H263 = 2
    SCREEN_VIDEO = 3
    ON2_VP6 = 4
    ON2_VP6_ALPHA = 5
    SCREEN_VIDEO_V2 = 6
    AVC = 7  # H.264


class DecoderState(Enum):
    """What the streaming decoder expects next at the front of the buffer."""

    AWAITING_PREVIOUS_TAG_SIZE = "awaiting_previous_tag_size"
    AWAITING_TAG = "awaiting_tag"

    def __str__(self) -> str:
        return self.value


class PreviousTagSizeCheck(str, Enum):
    """How PreviousTagSize markers are cross-checked against the prior tag."""

    OFF = "off"
    WARN = "warn"
    STRICT = "strict"

    def __str__(self) -> str:
        return self.value
