"""Erase and erase-range commands of the test shell."""

import re
from collections.abc import Iterable

from .shell_command import SsdCommand
from .ssd_config import MAX_LBA, MIN_LBA

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_ERROR_STATUS = 1
CHUNK_SIZE = 10


def _parse_int(text: str) -> int:
    """Parse a leading decimal integer; raise ValueError if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def group_and_chunk(lbas: Iterable[int]) -> list[tuple[int, int]]:
    """Group sorted LBAs into consecutive runs and split each run into chunks of ten.

    Returns ``(start, size)`` pairs.
    """
    groups: list[list[int]] = []
    for lba in sorted(lbas):
        if groups and groups[-1][0] + groups[-1][1] == lba:
            groups[-1][1] += 1
        else:
            groups.append([lba, 1])

    chunks: list[tuple[int, int]] = []
    for start, size in groups:
        for offset in range(0, size, CHUNK_SIZE):
            chunks.append((start + offset, min(CHUNK_SIZE, size - offset)))
    return chunks


class EraseCommand(SsdCommand):
    """Erase ``SIZE`` blocks from ``LBA``, sent to the SSD in chunks of ten."""

    name = "erase"
    usage = "erase <LBA> <SIZE>"
    description = "Erases the given area (sent in chunks of at most 10 blocks)."

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return len(args) == 2

    def _perform(self, chunks: list[tuple[int, int]]) -> None:
        where = "EraseCommand.performEraseCalls()"
        for start, size in chunks:
            line = self._command_line("E", start, size)
            self.log_message(where, f"[ERASE] {line}")
            if self.call_system(line) == _ERROR_STATUS:
                self.log_message(where, "[ERASE] ERROR")
            else:
                self.log_message(where, "[ERASE] COMPLETED!")

    def execute(self, cmd: str, args: list[str]) -> bool:
        """Erase the requested area; a negative size erases backwards.

        Blocks inside the LBA range are sent first, then those outside it.
        Raises ValueError if an argument is not a number.
        """
        lba = _parse_int(args[0])
        size = _parse_int(args[1])
        if size == 0:
            return True
        if size < 0:
            lba = lba + size + 1
            size = abs(size)

        blocks = range(lba, lba + size)
        valid = [block for block in blocks if MIN_LBA <= block <= MAX_LBA]
        invalid = [block for block in blocks if not MIN_LBA <= block <= MAX_LBA]
        self._perform(group_and_chunk(valid))
        self._perform(group_and_chunk(invalid))
        return True


class EraseRangeCommand(SsdCommand):
    """Erase every block between two LBAs, inclusive."""

    name = "erase_range"
    usage = "erase_range <START_LBA> <END_LBA>"
    description = "Erases the given range."

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return len(args) == 2

    def execute(self, cmd: str, args: list[str]) -> bool:
        """Erase from the lower to the higher LBA; print ERROR if either is out of range.

        Raises ValueError if an argument is not a number.
        """
        start = _parse_int(args[0])
        end = _parse_int(args[1])
        if not (MIN_LBA <= start <= MAX_LBA and MIN_LBA <= end <= MAX_LBA):
            print("ERROR")
            return True
        if start > end:
            start, end = end, start

        where = "EraseRangeCommand.Execute()"
        total = end - start + 1
        for offset in range(0, total, CHUNK_SIZE):
            line = self._command_line("E", start + offset, min(CHUNK_SIZE, total - offset))
            self.log_message(where, f"[ERASE] {line}")
            if self.call_system(line) == _ERROR_STATUS:
                self.log_message(where, "[ERASE] ERROR")
            else:
                self.log_message(where, "[ERASE] COMPLETED!")
        return True