"""Block-buffered reading of source files and writing of REL output."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from .defs import EOF_MARKER, MAX_PATH_LEN, REL_BUF_SIZE

SOURCE_BLOCK_SIZE = 1024
INCLUDE_BLOCK_SIZE = 64
DEFAULT_EXTENSION = ".ASM"


def print_char(ch: str) -> None:
    """Write one character to standard output."""
    sys.stdout.write(ch)


def print_str(text: str) -> None:
    """Write a string to standard output."""
    sys.stdout.write(text)


def newline() -> None:
    """Write a CR LF line end to standard output."""
    sys.stdout.write("\r\n")


def include_filename(name: str) -> str:
    """Build the file name of an include file from its directive operand.

    The name stops at the first control character or blank and is cut to
    the path limit; ``.ASM`` is added when it carries no extension.
    """
    kept: list[str] = []
    for ch in name[: MAX_PATH_LEN - 5]:
        if ord(ch) < 0x21:
            break
        kept.append(ch)
    result = "".join(kept)
    if "." not in result:
        result += DEFAULT_EXTENSION
    return result[: MAX_PATH_LEN - 1]


class _BlockReader:
    """Reads a file block by block; a 0x1A byte or the file's end stops it."""

    block_size = SOURCE_BLOCK_SIZE
    close_at_eof = False

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: BinaryIO | None = open(self.path, "rb")
        self._block = b""
        self._pos = 0
        self._eof = False

    def read_byte(self) -> int | None:
        """Return the next byte, or None once the end of the input is reached."""
        if self._eof:
            return None
        if self._pos >= len(self._block):
            self._block = self._file.read(self.block_size) if self._file else b""
            self._pos = 0
        if self._pos >= len(self._block) or self._block[self._pos] == EOF_MARKER:
            self._eof = True
            if self.close_at_eof:
                self.close()
            return None
        byte = self._block[self._pos]
        self._pos += 1
        return byte

    def close(self) -> None:
        """Close the underlying file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    @property
    def closed(self) -> bool:
        return self._file is None

    def __iter__(self) -> Iterator[int]:
        while (byte := self.read_byte()) is not None:
            yield byte

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()


class SourceReader(_BlockReader):
    """Main source file, read in 1024-byte blocks."""

    block_size = SOURCE_BLOCK_SIZE
    close_at_eof = False

    def __init__(self, path: str | Path) -> None:
        super().__init__(path)

    def read_byte(self) -> int | None:
        """Return the next source byte, or None at the end of the file."""
        return super().read_byte()

    def close(self) -> None:
        """Close the source file."""
        super().close()

    def __iter__(self) -> Iterator[int]:
        return super().__iter__()

    def __enter__(self) -> SourceReader:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class IncludeReader(_BlockReader):
    """Include file, read in 64-byte blocks and closed at its end."""

    block_size = INCLUDE_BLOCK_SIZE
    close_at_eof = True

    def __init__(self, name: str) -> None:
        super().__init__(include_filename(name))

    def read_byte(self) -> int | None:
        """Return the next include byte, or None at the end of the file."""
        return super().read_byte()

    def close(self) -> None:
        """Close the include file."""
        super().close()

    def __iter__(self) -> Iterator[int]:
        return super().__iter__()

    def __enter__(self) -> IncludeReader:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class RelWriter:
    """REL output file written in 512-byte blocks."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: BinaryIO | None = open(self.path, "wb")
        self._buffer = bytearray()

    def write_byte(self, byte: int) -> None:
        """Queue one byte, writing out the buffer first when it is full."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        if self._file is None:
            raise ValueError("write to a closed REL file")
        if len(self._buffer) >= REL_BUF_SIZE:
            self.flush()
        self._buffer.append(byte)

    def flush(self) -> None:
        """Write out whatever is buffered."""
        if not self._buffer or self._file is None:
            return
        written = self._file.write(self._buffer)
        if written != len(self._buffer):
            raise OSError("Write error !")
        self._file.flush()
        self._buffer.clear()

    def close(self) -> None:
        """Flush the buffer and close the file."""
        if self._file is not None:
            self.flush()
            self._file.close()
            self._file = None

    def __enter__(self) -> RelWriter:
        return self

    def __exit__(self, *args) -> None:
        self.close()