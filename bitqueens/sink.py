"""Buffered solution writer backed by an anonymous temporary file.

Completed placements are formatted into a bounded in-memory ``bytearray`` and
written wholesale to scratch storage each time the buffer fills up, so memory
stays bounded by ``buffer_size`` even when tens of millions of lines are
produced. Once the search is over, ``copy_to`` streams the scratch file
verbatim, in emission order, to the final destination after the caller has
written its header.

Line format: 1-based column values separated by single spaces, one placement
per line, ``\\n`` terminated.
"""

from __future__ import annotations

import shutil
import tempfile
from typing import BinaryIO, Optional, Sequence

from .engine import MAX_BOARD_SIZE

DEFAULT_BUFFER_SIZE: int = 65536
COPY_CHUNK_SIZE: int = 4096

# ASCII digits for every column value a supported board can hold.
_DIGITS = [str(value).encode("ascii") for value in range(MAX_BOARD_SIZE + 1)]


class SolutionSink:
    """Accumulate placement lines and flush them to temporary storage.

    Parameters
    ----------
    buffer_size : int, default 65536
        Number of buffered bytes that triggers a flush to the backing file.

    Raises
    ------
    OSError
        If the temporary backing file cannot be created.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError("buffer_size must be >= 1.")
        self.buffer_size = buffer_size
        self.lines_written = 0
        self.bytes_written = 0
        self._buffer = bytearray()
        self._file: Optional[BinaryIO] = tempfile.TemporaryFile(mode="w+b")

    def __enter__(self) -> "SolutionSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._file is None

    def append(self, placement: Sequence[int]) -> None:
        """Buffer one placement line."""
        buffer = self._buffer
        buffer += b" ".join([_DIGITS[value] for value in placement])
        buffer += b"\n"
        self.lines_written += 1
        if len(buffer) >= self.buffer_size:
            self.flush()

    def append_mirrored(self, placement: Sequence[int], size: int) -> None:
        """Buffer the left/right reflection of ``placement`` without copying it."""
        top = size + 1
        buffer = self._buffer
        buffer += b" ".join([_DIGITS[top - value] for value in placement])
        buffer += b"\n"
        self.lines_written += 1
        if len(buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write every buffered byte to the backing file and reset the buffer."""
        if self._file is None:
            raise ValueError("Solution sink is closed.")
        if self._buffer:
            self._file.write(self._buffer)
            self.bytes_written += len(self._buffer)
            self._buffer.clear()

    def copy_to(self, destination: BinaryIO) -> None:
        """Flush, then copy all written lines, in order, into ``destination``."""
        self.flush()
        assert self._file is not None
        self._file.flush()
        self._file.seek(0)
        shutil.copyfileobj(self._file, destination, COPY_CHUNK_SIZE)
        self._file.seek(0, 2)

    def close(self) -> None:
        """Flush pending bytes and release the backing file (idempotent)."""
        if self._file is None:
            return
        try:
            self.flush()
        finally:
            self._file.close()
            self._file = None
