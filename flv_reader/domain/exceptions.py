"""FLV decoding exceptions.

Every fatal condition the decoder can hit is an ``FLVError`` subclass
carrying a structured ``ErrorContext``. "Not enough bytes yet" is not an
error and never shows up here; the decoder reports it by returning ``None``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ErrorContext:
    """Structured error context using dataclass."""

    field_name: Optional[str] = None
    invalid_value: Optional[Any] = None
    offset: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        result: Dict[str, Any] = {}
        if self.field_name:
            result["field_name"] = self.field_name
        if self.invalid_value is not None:
            result["invalid_value"] = self.invalid_value
        if self.offset is not None:
            result["offset"] = self.offset
        if self.extra:
            result.update(self.extra)
        return result


class FLVError(Exception):
    """Base exception for all FLV decoding errors."""

    def __init__(self, message: str, *, context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        parts = [self.message]

        if self.context.field_name:
            parts.append(f"Field: {self.context.field_name}")

        if self.context.invalid_value is not None:
            parts.append(f"Invalid value: {self.context.invalid_value!r}")

        return " - ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )


class FLVHeaderError(FLVError):
    """The 9-byte file header cannot be interpreted. Fatal for the stream."""


class MalformedSignatureError(FLVHeaderError):
    """The stream does not start with the ``FLV`` signature."""

    def __init__(self, signature: bytes):
        super().__init__(
            f"Invalid FLV signature: {signature!r}",
            context=ErrorContext(field_name="signature", invalid_value=signature),
        )
        self.signature = signature


class TruncatedHeaderError(FLVHeaderError):
    """Fewer than 9 bytes were available for the file header."""

    def __init__(self, available: int, required: int = 9):
        super().__init__(
            f"FLV header truncated: expected {required} bytes, got {available}",
            context=ErrorContext(extra={"available": available, "required": required}),
        )
        self.available = available
        self.required = required


class FLVDecodeError(FLVError):
    """A tag or marker in the body of the stream is malformed. Fatal."""


class InvalidTagHeaderError(FLVDecodeError):
    """The reserved stream id field of a tag header is not zero."""

    def __init__(self, header_bytes: bytes):
        stream_id = int.from_bytes(header_bytes[8:11], "big")
        super().__init__(
            f"Invalid tag header: {list(header_bytes)}",
            context=ErrorContext(field_name="stream_id", invalid_value=stream_id),
        )
        self.header_bytes = bytes(header_bytes)
        self.stream_id = stream_id


class EmptyMediaTagError(FLVDecodeError):
    """An audio or video tag has no body byte to classify it."""

    def __init__(self, tag_type: Any):
        super().__init__(
            f"{tag_type} tag has an empty body",
            context=ErrorContext(field_name="data_size", invalid_value=0),
        )
        self.tag_type = tag_type


class TruncatedTagError(FLVDecodeError):
    """The stream ended while a record was only partially buffered.

    ``offset`` is the stream byte position where the incomplete record
    starts, when the caller knows it.
    """

    def __init__(self, buffered: int, state: Any, offset: Optional[int] = None):
        super().__init__(
            f"Stream ended with {buffered} unconsumed bytes while {state}",
            context=ErrorContext(
                offset=offset, extra={"buffered": buffered, "state": str(state)}
            ),
        )
        self.buffered = buffered
        self.state = state
        self.offset = offset


class PreviousTagSizeMismatchError(FLVDecodeError):
    """A PreviousTagSize marker disagrees with the size of the tag before it."""

    def __init__(self, actual: int, expected: int):
        super().__init__(
            f"PreviousTagSize mismatch: got {actual}, expected {expected}",
            context=ErrorContext(
                field_name="previous_tag_size",
                invalid_value=actual,
                extra={"expected": expected},
            ),
        )
        self.actual = actual
        self.expected = expected


class InvalidBitfieldError(FLVDecodeError):
    """A sub-field of an audio or video header byte holds an undefined value."""

    field_label = "bitfield"

    def __init__(self, value: int):
        super().__init__(
            f"Invalid {self.field_label}: {value}",
            context=ErrorContext(field_name=self.field_label, invalid_value=value),
        )
        self.value = value


class InvalidSoundFormatError(InvalidBitfieldError):
    field_label = "sound format"


class InvalidSoundRateError(InvalidBitfieldError):
    field_label = "sound rate"


class InvalidSoundSizeError(InvalidBitfieldError):
    field_label = "sound size"


class InvalidSoundTypeError(InvalidBitfieldError):
    field_label = "sound type"


class InvalidFrameTypeError(InvalidBitfieldError):
    field_label = "video frame type"


class InvalidCodecIdError(InvalidBitfieldError):
    field_label = "codec id"


class StreamClosedError(FLVError):
    """A driver was used again after it failed with a fatal error."""

    def __init__(self, cause: BaseException):
        super().__init__(
            f"FLV stream is closed after a fatal error: {cause}",
            context=ErrorContext(extra={"cause": type(cause).__name__}),
        )
        self.cause = cause
