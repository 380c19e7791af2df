"""Optional cross-check of PreviousTagSize markers.

A well-formed stream starts with ``PreviousTagSize(0)`` and every later
marker equals the full size (11 + data size) of the tag just before it.
The decoder itself never enforces this.
"""

import logging

from flv_reader.domain.enums import PreviousTagSizeCheck
from flv_reader.domain.exceptions import PreviousTagSizeMismatchError
from flv_reader.domain.models import PreviousTagSize, Record, Tag

logger = logging.getLogger(__name__)


class PreviousTagSizeValidator:
    """Track the last tag size and compare it with the next marker."""

    def __init__(self, mode: PreviousTagSizeCheck = PreviousTagSizeCheck.OFF):
        self.mode = PreviousTagSizeCheck(mode)
        self.mismatches = 0
        self._expected = 0

    def observe(self, record: Record) -> None:
        """Feed every emitted record, in stream order.

        Raises:
            PreviousTagSizeMismatchError: In strict mode, on a mismatch
        """
        if isinstance(record, Tag):
            self._expected = record.header.tag_size
            return

        if self.mode is PreviousTagSizeCheck.OFF:
            return

        if isinstance(record, PreviousTagSize) and record.value != self._expected:
            self.mismatches += 1
            if self.mode is PreviousTagSizeCheck.STRICT:
                raise PreviousTagSizeMismatchError(record.value, self._expected)
            logger.warning(
                f"PreviousTagSize mismatch: got {record.value}, expected {self._expected}"
            )

    def reset(self) -> None:
        self.mismatches = 0
        self._expected = 0
