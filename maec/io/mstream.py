"""Streams that move raw bytes to and from memory or files.

Streams only move bytes; they do not interpret them.
"""

from __future__ import annotations

import abc
import enum
import os
from collections.abc import Iterable
from typing import BinaryIO


class MStreamState(enum.Enum):
    """Lifecycle states of a stream."""

    INIT = enum.auto()
    STARTED = enum.auto()
    STOPPED = enum.auto()
    ERR = enum.auto()


class BaseMStream(abc.ABC):
    """State handling and seeking shared by every stream.

    A stream is good while it is new or started, and bad once it is
    stopped or has failed. Streams are context managers: entering starts
    them and leaving stops them.
    """

    INPUT = False
    OUTPUT = False

    def __init__(self) -> None:
        self.state = MStreamState.INIT

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    @abc.abstractmethod
    def seek(self, pos: int) -> None:
        """Move to byte position ``pos``."""

    def start(self) -> None:
        """Make the stream ready for use."""
        self.state = MStreamState.STARTED

    def stop(self) -> None:
        """Finish with the stream; it should not be used afterwards."""
        self.state = MStreamState.STOPPED

    def good(self) -> bool:
        """True while the stream can read or write."""
        return self.state in (MStreamState.INIT, MStreamState.STARTED)

    def bad(self) -> bool:
        """True once the stream can no longer be used."""
        return not self.good()

    def is_input(self) -> bool:
        """True for streams that can be read."""
        return self.INPUT

    def is_output(self) -> bool:
        """True for streams that can be written."""
        return self.OUTPUT


class BaseMIStream(BaseMStream):
    """A stream that can be read."""

    INPUT = True

    @abc.abstractmethod
    def read(self, num: int) -> bytes:
        """Read up to ``num`` bytes."""


class BaseMOStream(BaseMStream):
    """A stream that can be written."""

    OUTPUT = True

    @abc.abstractmethod
    def write(self, data: bytes) -> None:
        """Write ``data`` at the current position."""


def _check_pos(pos: int) -> int:
    if pos < 0:
        raise ValueError(f"cannot seek to negative position {pos}")
    return pos


class CharIStream(BaseMIStream):
    """Reads bytes from an in-memory array."""

    def __init__(self, data: int | Iterable[int] = b"") -> None:
        super().__init__()
        self.array = bytearray(data)
        self.index = 0

    def seek(self, pos: int) -> None:
        """Move the read position to ``pos``."""
        self.index = _check_pos(pos)

    def read(self, num: int) -> bytes:
        """Return up to ``num`` bytes from the current position and advance."""
        if num < 0:
            raise ValueError(f"cannot read a negative number of bytes: {num}")
        chunk = bytes(self.array[self.index:self.index + num])
        self.index += len(chunk)
        return chunk


class CharOStream(BaseMOStream):
    """Writes bytes into an in-memory array, growing it as needed."""

    def __init__(self, data: int | Iterable[int] = b"") -> None:
        super().__init__()
        self.array = bytearray(data)
        self.index = 0

    def seek(self, pos: int) -> None:
        """Move the write position to ``pos``."""
        self.index = _check_pos(pos)

    def write(self, data: bytes) -> None:
        """Write ``data`` at the current position, overwriting or extending."""
        if self.index > len(self.array):
            self.array.extend(bytes(self.index - len(self.array)))
        self.array[self.index:self.index + len(data)] = data
        self.index += len(data)


class _FileMStream(BaseMStream):
    """Opens and closes a file for a stream."""

    MODE = "rb"

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        super().__init__()
        self.path = path
        self._file: BinaryIO | None = None

    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise RuntimeError(f"{type(self).__name__} is not open; start it first")
        return self._file

    def open(self) -> None:
        """Open the file at ``path``."""
        self._file = open(self.path, self.MODE)  # noqa: SIM115

    def close(self) -> None:
        """Close the file, if open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def start(self) -> None:
        """Open the file and mark the stream started; failure marks it errored."""
        try:
            self.open()
        except OSError:
            self.state = MStreamState.ERR
            raise
        super().start()

    def stop(self) -> None:
        """Close the file and mark the stream stopped."""
        self.close()
        super().stop()


class FIStream(_FileMStream, BaseMIStream):
    """Reads bytes from a file."""

    MODE = "rb"

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        super().__init__(path)
        self._eof = False

    def seek(self, pos: int) -> None:
        """Move the read position to ``pos``."""
        self._handle().seek(_check_pos(pos))
        self._eof = False

    def read(self, num: int) -> bytes:
        """Read up to ``num`` bytes; a short read marks the end of the file."""
        if num < 0:
            raise ValueError(f"cannot read a negative number of bytes: {num}")
        chunk = self._handle().read(num)
        if len(chunk) < num:
            self._eof = True
        return chunk

    def start(self) -> None:
        """Open the file for reading."""
        self._eof = False
        super().start()

    def stop(self) -> None:
        """Close the file."""
        super().stop()

    def eof(self) -> bool:
        """True once a read has run past the end of the file."""
        return self._eof


class FOStream(_FileMStream, BaseMOStream):
    """Writes bytes to a file."""

    MODE = "wb"

    def seek(self, pos: int) -> None:
        """Move the write position to ``pos``."""
        self._handle().seek(_check_pos(pos))

    def write(self, data: bytes) -> None:
        """Write ``data`` to the file."""
        self._handle().write(data)

    def start(self) -> None:
        """Open the file for writing, truncating it."""
        super().start()

    def stop(self) -> None:
        """Flush and close the file."""
        super().stop()