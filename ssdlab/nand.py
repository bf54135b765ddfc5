"""File-backed NAND storage of 32-bit values per logical block."""

import re
import struct
from pathlib import Path

from .ssd_config import LBA_SIZE, MAX_LBA, NAND_FILE_NAME

_CELL = struct.Struct("<I")
_LEADING_HEX = re.compile(r"\s*([0-9a-fA-F]+)")
_UINT32_MAX = 0xFFFFFFFF


def _pattern_value(pattern: str) -> int:
    """Turn ``0x...`` text into an unsigned 32-bit value."""
    match = _LEADING_HEX.match(pattern[2:])
    if match is None:
        raise ValueError(f"not a hex pattern: {pattern!r}")
    return min(int(match.group(1), 16), _UINT32_MAX)


class NandStorage:
    """Stores one little-endian 32-bit word per LBA in a single file."""

    def __init__(self, path: str | Path = NAND_FILE_NAME) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        """Return True if the backing file is present."""
        return self.path.is_file()

    def _initialize(self) -> None:
        with self.path.open("wb") as nand:
            nand.write(bytes(MAX_LBA * LBA_SIZE))

    def write(self, lba: int | str, pattern: str) -> None:
        """Store ``pattern`` at ``lba``, creating the file if needed.

        Raises OSError if the file cannot be created or written.
        """
        if not self.exists():
            self._initialize()
        offset = int(lba) * LBA_SIZE
        value = _pattern_value(pattern)
        with self.path.open("r+b") as nand:
            nand.seek(offset)
            nand.write(_CELL.pack(value))

    def read(self, lba: int | str) -> int:
        """Return the value at ``lba``, or 0 if it cannot be read."""
        offset = int(lba) * LBA_SIZE
        try:
            with self.path.open("rb") as nand:
                nand.seek(offset)
                data = nand.read(_CELL.size)
        except OSError:
            return 0
        if len(data) < _CELL.size:
            return 0
        return _CELL.unpack(data)[0]