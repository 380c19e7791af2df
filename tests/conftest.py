"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import logfire  # noqa: E402
import pytest  # noqa: E402

from flv_reader.infrastructure.config import DecoderConfig, get_settings  # noqa: E402
from tests.factories import build_file_header, build_stream, build_tag  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def silence_logfire():
    """Configure Logfire so spans and logs go nowhere during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def decoder_config() -> DecoderConfig:
    """Default decoder configuration."""
    return DecoderConfig()


@pytest.fixture
def audio_tag_bytes() -> bytes:
    """Audio tag: AAC, 44kHz, 16-bit, stereo, one payload byte."""
    return build_tag(8, b"\xaf\x01")


@pytest.fixture
def sample_stream(audio_tag_bytes) -> bytes:
    """File header, three tags of different types, and their markers."""
    return build_stream(
        [
            build_tag(18, b"\x02\x00\x0aonMetaData", timestamp=0),
            audio_tag_bytes,
            build_tag(9, b"\x17\x00\x00\x00\x00", timestamp=40),
        ],
        header=build_file_header(version=1, type_flags=0x05),
    )
