"""FLV streaming components.

Bitfield sub-decoders, the file header parser, the tag decoder, the
incremental body decoder and the drivers that feed it.
"""

from .bitfields import (
    decode_audio_tag_header,
    decode_codec_id,
    decode_frame_type,
    decode_sound_format,
    decode_sound_rate,
    decode_sound_size,
    decode_sound_type,
    decode_video_tag_header,
)
from .file_header import FLV_SIGNATURE, parse_file_header
from .flv_decoder import FLVBodyDecoder, decode_step
from .flv_stream import (
    FLVItem,
    FLVStreamProcessor,
    decode_flv,
    iter_flv,
    open_flv,
    read_flv,
)
from .tag_decoder import decode_tag_body, decode_tag_header, decode_tag_type
from .validation import PreviousTagSizeValidator

__all__ = [
    # Bitfields
    "decode_audio_tag_header",
    "decode_codec_id",
    "decode_frame_type",
    "decode_sound_format",
    "decode_sound_rate",
    "decode_sound_size",
    "decode_sound_type",
    "decode_video_tag_header",
    # File header
    "FLV_SIGNATURE",
    "parse_file_header",
    # Tags
    "decode_tag_body",
    "decode_tag_header",
    "decode_tag_type",
    # Decoder
    "FLVBodyDecoder",
    "decode_step",
    # Drivers
    "FLVItem",
    "FLVStreamProcessor",
    "decode_flv",
    "iter_flv",
    "open_flv",
    "read_flv",
    # Validation
    "PreviousTagSizeValidator",
]
