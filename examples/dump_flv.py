"""Example printing every structural record of an FLV file.

Usage:
    python examples/dump_flv.py path/to/file.flv
"""

import asyncio
import sys

from flv_reader import PreviousTagSize, Tag, open_flv
from flv_reader.domain import AudioTagBody, ReservedTagBody, ScriptTagBody, VideoTagBody
from flv_reader.infrastructure.observability import configure_logfire, configure_logging

SEPARATOR = "=" * 37


def print_tag(index: int, tag: Tag) -> None:
    header = tag.header
    print(SEPARATOR)
    print(f"TagIndex: {index}")
    print(f"TagType: {header.tag_type.name}")
    print(f"DataSize: {header.data_size}")
    print(f"Timestamp: {header.timestamp}")

    body = tag.body
    if isinstance(body, AudioTagBody):
        print(f"SoundFormat: {body.header.sound_format.name}")
        print(f"SoundRate: {body.header.sound_rate.name}")
        print(f"SoundSize: {body.header.sound_size.name}")
        print(f"SoundType: {body.header.sound_type.name}")
        print(f"Data: {len(body.payload)} bytes")
    elif isinstance(body, VideoTagBody):
        print(f"FrameType: {body.header.frame_type.name}")
        print(f"CodecId: {body.header.codec_id.name}")
        print(f"Data: {len(body.payload)} bytes")
    elif isinstance(body, ScriptTagBody):
        print(f"RawScriptData: {body.payload!r}")
    elif isinstance(body, ReservedTagBody):
        print(f"Data: {body.payload!r}")


async def main(path: str) -> None:
    file_size, header, records = await open_flv(path)

    print(SEPARATOR)
    print(f"File: {path}")
    print(f"FileSize: {file_size}")
    print(f"Version: {header.version}")
    print(f"Type: {header.type_flags}")
    print(f"DataOffset: {header.data_offset}")

    previous_tag_size_index = 0
    tag_index = 1
    async for record in records:
        if isinstance(record, PreviousTagSize):
            print(SEPARATOR)
            print(f"PreviousTagSize{previous_tag_size_index}: {record.value}")
            previous_tag_size_index += 1
        else:
            print_tag(tag_index, record)
            tag_index += 1

    print(SEPARATOR)


if __name__ == "__main__":
    configure_logging()
    configure_logfire()
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "./resources/test.flv"))
