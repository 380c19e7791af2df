"""FLV stream drivers.

These own the pending-byte buffer and feed it to the incremental decoder:

- ``FLVStreamProcessor``: push data in as it arrives, pull records out.
- ``decode_flv`` / ``iter_flv``: synchronous helpers over in-memory data.
- ``read_flv``: async reader over an ``asyncio.StreamReader``.
- ``open_flv``: async reader over a file on disk (via aiofiles).

Every driver parses the 9-byte file header once, then yields records in
stream order. At end of stream any leftover bytes are a fatal
``TruncatedTagError`` (or ``TruncatedHeaderError`` if the header itself
never completed).

The async readers emit Logfire spans and events. Applications call
``configure_logfire`` (or ``logfire.configure``) once at startup; until then
Logfire warns that it is not configured.
"""

import asyncio
import logging
from os import PathLike
from typing import (
    Any,
    AsyncIterator,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

import aiofiles
import aiofiles.os
import logfire

from flv_reader.domain.exceptions import (
    FLVError,
    StreamClosedError,
    TruncatedHeaderError,
    TruncatedTagError,
)
from flv_reader.domain.models import FILE_HEADER_SIZE, FileHeader, Record, Tag
from flv_reader.infrastructure.config import DecoderConfig, get_settings
from flv_reader.infrastructure.streaming.file_header import parse_file_header
from flv_reader.infrastructure.streaming.flv_decoder import FLVBodyDecoder
from flv_reader.infrastructure.streaming.validation import PreviousTagSizeValidator

logger = logging.getLogger(__name__)

FLVItem = Union[FileHeader, Record]


class FLVStreamProcessor:
    """Push-style FLV stream processor for real-time parsing."""

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or get_settings().decoder
        self.buffer = bytearray()
        self.decoder = FLVBodyDecoder()
        self.validator = PreviousTagSizeValidator(self.config.previous_tag_size_check)
        self.header: Optional[FileHeader] = None
        self.records_emitted = 0
        self.tag_counts: Dict[str, int] = {}
        self.last_timestamp: Optional[int] = None
        # Stream byte offset of the first buffered byte.
        self.position = 0
        self._header_emitted = False
        self._offset_remaining = 0
        self._error: Optional[FLVError] = None

    @property
    def header_parsed(self) -> bool:
        return self.header is not None

    @property
    def closed(self) -> bool:
        """True once a fatal error has been raised."""
        return self._error is not None

    def feed(self, data: bytes) -> None:
        """Append bytes from the source to the pending buffer."""
        self._ensure_open()
        self.buffer.extend(data)

    def read_header(self) -> Optional[FileHeader]:
        """Parse the file header once 9 bytes are buffered.

        Returns:
            The header, or None while fewer than 9 bytes have arrived
        """
        self._ensure_open()
        if self.header is not None:
            return self.header
        if len(self.buffer) < FILE_HEADER_SIZE:
            return None

        try:
            header = parse_file_header(self.buffer)
        except FLVError as e:
            self._fail(e)
            raise

        del self.buffer[:FILE_HEADER_SIZE]
        self.position = FILE_HEADER_SIZE
        self.header = header
        if self.config.skip_to_data_offset:
            self._offset_remaining = max(0, header.data_offset - FILE_HEADER_SIZE)

        logger.info(
            f"FLV stream: version={header.version}, audio={header.has_audio}, "
            f"video={header.has_video}"
        )
        return header

    def records(self) -> Iterator[Record]:
        """Yield every record that can be decoded from the buffered bytes."""
        if self.read_header() is None or not self._skip_to_data_offset():
            return

        while True:
            try:
                buffered = len(self.buffer)
                record = self.decoder.decode(self.buffer)
                if record is None:
                    return
                self.position += buffered - len(self.buffer)
                self.validator.observe(record)
            except FLVError as e:
                self._fail(e)
                raise

            self._track(record)
            yield record

    def poll(self) -> Iterator[FLVItem]:
        """Like ``records`` but yields the file header first, exactly once."""
        header = self.read_header()
        if header is None:
            return
        if not self._header_emitted:
            self._header_emitted = True
            yield header
        yield from self.records()

    def process_data(self, data: bytes) -> List[Record]:
        """Process incoming FLV data and return the records it completes."""
        self.feed(data)
        return list(self.records())

    def finish(self) -> None:
        """Signal end of stream.

        Call after draining ``records``/``poll``. A clean end leaves nothing
        buffered, whichever record the decoder was waiting for.

        Raises:
            TruncatedHeaderError: If the stream ended inside the file header
            TruncatedTagError: If the stream ended inside a record
        """
        self._ensure_open()
        error: Optional[FLVError] = None
        if self.header is None:
            error = TruncatedHeaderError(len(self.buffer), FILE_HEADER_SIZE)
        elif self._offset_remaining:
            error = TruncatedHeaderError(
                self.header.data_offset - self._offset_remaining, self.header.data_offset
            )
        elif self.buffer:
            error = TruncatedTagError(
                len(self.buffer), self.decoder.state, offset=self.position
            )

        if error is not None:
            self._fail(error)
            raise error

        logger.debug(f"FLV stream finished after {self.records_emitted} records")

    def get_stream_info(self) -> Dict[str, Any]:
        """Get current stream information."""
        info: Dict[str, Any] = {
            "header_parsed": self.header_parsed,
            "records_emitted": self.records_emitted,
            "tags_processed": sum(self.tag_counts.values()),
            "tag_counts": dict(self.tag_counts),
            "last_timestamp": self.last_timestamp,
            "position": self.position,
            "buffer_size": len(self.buffer),
            "decoder_state": str(self.decoder.state),
            "previous_tag_size_mismatches": self.validator.mismatches,
        }
        if self.header is not None:
            info.update(
                {
                    "version": self.header.version,
                    "has_audio": self.header.has_audio,
                    "has_video": self.header.has_video,
                    "data_offset": self.header.data_offset,
                }
            )
        return info

    def reset(self) -> None:
        """Reset the processor state."""
        self.buffer.clear()
        self.decoder.reset()
        self.validator.reset()
        self.header = None
        self.records_emitted = 0
        self.tag_counts.clear()
        self.last_timestamp = None
        self.position = 0
        self._header_emitted = False
        self._offset_remaining = 0
        self._error = None

    def _skip_to_data_offset(self) -> bool:
        if self._offset_remaining:
            skipped = min(self._offset_remaining, len(self.buffer))
            del self.buffer[:skipped]
            self.position += skipped
            self._offset_remaining -= skipped
        return self._offset_remaining == 0

    def _track(self, record: Record) -> None:
        self.records_emitted += 1
        if isinstance(record, Tag):
            name = record.header.tag_type.name
            self.tag_counts[name] = self.tag_counts.get(name, 0) + 1
            self.last_timestamp = record.header.timestamp
            logger.debug(
                f"Decoded {name} tag: data_size={record.header.data_size}, "
                f"timestamp={record.header.timestamp}"
            )

    def _ensure_open(self) -> None:
        if self._error is not None:
            raise StreamClosedError(self._error)

    def _fail(self, error: FLVError) -> None:
        self._error = error
        logger.error(f"Error processing FLV data: {error}")


def decode_flv(
    data: bytes, config: Optional[DecoderConfig] = None
) -> Tuple[FileHeader, List[Record]]:
    """Decode a complete in-memory FLV stream.

    Raises:
        FLVError: On any malformed or truncated input
    """
    processor = FLVStreamProcessor(config)
    records = processor.process_data(data)
    processor.finish()
    if processor.header is None:
        raise TruncatedHeaderError(len(data), FILE_HEADER_SIZE)
    return processor.header, records


def iter_flv(
    chunks: Iterable[bytes], config: Optional[DecoderConfig] = None
) -> Iterator[FLVItem]:
    """Yield the file header and then every record from a chunked byte source.

    Chunks may split the stream at any byte boundary.
    """
    processor = FLVStreamProcessor(config)
    for chunk in chunks:
        processor.feed(chunk)
        yield from processor.poll()
    processor.finish()


async def read_flv(
    reader: asyncio.StreamReader, config: Optional[DecoderConfig] = None
) -> AsyncIterator[FLVItem]:
    """Async generator yielding the file header and records from a stream reader.

    Waiting for more bytes happens in ``reader.read``; an empty read is
    end of stream.
    """
    config = config or get_settings().decoder
    processor = FLVStreamProcessor(config)

    while True:
        chunk = await reader.read(config.chunk_size)
        if not chunk:
            break
        processor.feed(chunk)
        for item in processor.poll():
            yield item

    processor.finish()
    logfire.info(
        "FLV stream read",
        records=processor.records_emitted,
        tag_counts=processor.tag_counts,
    )


async def open_flv(
    path: Union[str, "PathLike[str]"], config: Optional[DecoderConfig] = None
) -> Tuple[int, FileHeader, AsyncIterator[Record]]:
    """Open an FLV file and parse its header.

    The header is read with its own short-lived file handle. The returned
    iterator opens the file again on first iteration and resumes right
    after the header, so dropping it unused leaves nothing open.

    Returns:
        Tuple of (file size in bytes, file header, async record iterator)
    """
    config = config or get_settings().decoder
    file_size = (await aiofiles.os.stat(path)).st_size
    processor = FLVStreamProcessor(config)

    with logfire.span("flv.open {path}", path=str(path), file_size=file_size):
        async with aiofiles.open(path, "rb") as handle:
            header = processor.read_header()
            while header is None:
                chunk = await handle.read(FILE_HEADER_SIZE - len(processor.buffer))
                if not chunk:
                    processor.finish()
                processor.feed(chunk)
                header = processor.read_header()

    resume_at = processor.position + len(processor.buffer)
    return file_size, header, _iter_file_records(path, processor, resume_at)


async def _iter_file_records(
    path: Union[str, "PathLike[str]"], processor: FLVStreamProcessor, resume_at: int
) -> AsyncIterator[Record]:
    async with aiofiles.open(path, "rb") as handle:
        await handle.seek(resume_at)
        while True:
            for record in processor.records():
                yield record
            chunk = await handle.read(processor.config.chunk_size)
            if not chunk:
                break
            processor.feed(chunk)

    processor.finish()
    logfire.info(
        "FLV file read {path}",
        path=str(path),
        records=processor.records_emitted,
        tag_counts=processor.tag_counts,
    )
