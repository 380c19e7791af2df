"""Domain layer for flv-reader.

Plain dataclasses, enums and exceptions describing the structure of an FLV
stream, independent of how its bytes are obtained.
"""

from flv_reader.domain.enums import (
    DecoderState,
    PreviousTagSizeCheck,
    SoundFormat,
    SoundRate,
    SoundSize,
    SoundType,
    TagType,
    VideoCodec,
    VideoFrameType,
)
from flv_reader.domain.exceptions import (
    EmptyMediaTagError,
    ErrorContext,
    FLVDecodeError,
    FLVError,
    FLVHeaderError,
    InvalidBitfieldError,
    InvalidCodecIdError,
    InvalidFrameTypeError,
    InvalidSoundFormatError,
    InvalidSoundRateError,
    InvalidSoundSizeError,
    InvalidSoundTypeError,
    InvalidTagHeaderError,
    MalformedSignatureError,
    PreviousTagSizeMismatchError,
    StreamClosedError,
    TruncatedHeaderError,
    TruncatedTagError,
)
from flv_reader.domain.models import (
    FILE_HEADER_SIZE,
    PREVIOUS_TAG_SIZE_SIZE,
    TAG_HEADER_SIZE,
    AnyTagType,
    AudioTagBody,
    AudioTagHeader,
    DecodeResult,
    FileHeader,
    PreviousTagSize,
    Record,
    ReservedTagBody,
    ReservedTagType,
    ScriptTagBody,
    Tag,
    TagBody,
    TagHeader,
    VideoTagBody,
    VideoTagHeader,
)

__all__ = [
    # Enums
    "DecoderState",
    "PreviousTagSizeCheck",
    "SoundFormat",
    "SoundRate",
    "SoundSize",
    "SoundType",
    "TagType",
    "VideoCodec",
    "VideoFrameType",
    # Exceptions
    "EmptyMediaTagError",
    "ErrorContext",
    "FLVDecodeError",
    "FLVError",
    "FLVHeaderError",
    "InvalidBitfieldError",
    "InvalidCodecIdError",
    "InvalidFrameTypeError",
    "InvalidSoundFormatError",
    "InvalidSoundRateError",
    "InvalidSoundSizeError",
    "InvalidSoundTypeError",
    "InvalidTagHeaderError",
    "MalformedSignatureError",
    "PreviousTagSizeMismatchError",
    "StreamClosedError",
    "TruncatedHeaderError",
    "TruncatedTagError",
    # Models
    "FILE_HEADER_SIZE",
    "PREVIOUS_TAG_SIZE_SIZE",
    "TAG_HEADER_SIZE",
    "AnyTagType",
    "AudioTagBody",
    "AudioTagHeader",
    "DecodeResult",
    "FileHeader",
    "PreviousTagSize",
    "Record",
    "ReservedTagBody",
    "ReservedTagType",
    "ScriptTagBody",
    "Tag",
    "TagBody",
    "TagHeader",
    "VideoTagBody",
    "VideoTagHeader",
]
