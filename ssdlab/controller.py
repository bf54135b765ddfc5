"""Front end of the SSD simulator: validates requests and routes them."""

import re

from .command_buffer import CommandBuffer
from .nand import NandStorage
from .recorder import Recorder
from .ssd_config import FAIL_BUFFER_READ_MESSAGE, MAX_LBA, MIN_LBA
from .validator import Validator

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _as_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _uppercase_after_prefix(value: str) -> str:
    if len(value) <= 2:
        return value
    return value[:2] + value[2:].upper()


class SsdController:
    """Reads, writes and erases through the command buffer and NAND storage."""

    def __init__(
        self,
        nand: NandStorage | None = None,
        recorder: Recorder | None = None,
        validator: Validator | None = None,
        command_buffer: CommandBuffer | None = None,
    ) -> None:
        self.nand = nand if nand is not None else NandStorage()
        self.recorder = recorder if recorder is not None else Recorder()
        self.validator = validator if validator is not None else Validator()
        self.command_buffer = command_buffer if command_buffer is not None else CommandBuffer()

    @property
    def result(self) -> str:
        """The last recorded result."""
        return self.recorder.result

    def _record_error(self) -> None:
        self.recorder.record_error(self.validator.error_reason)

    def _is_valid_lba(self, lba: str) -> bool:
        return self.validator.is_number_within_range(lba, MIN_LBA, MAX_LBA)

    def write(self, lba: int | str, pattern: str) -> None:
        """Queue a write of ``pattern`` to ``lba``."""
        lba = str(lba)
        if not self._is_valid_lba(lba) or not self.validator.is_valid_data_pattern(pattern):
            self._record_error()
            return
        if self.command_buffer.is_full():
            self.flush()
        self.command_buffer.add_command(f"W {_as_int(lba)} {pattern}")

    def read(self, lba: int | str) -> None:
        """Record the value stored at ``lba``, looking in the buffer first."""
        lba = str(lba)
        if not self._is_valid_lba(lba):
            self._record_error()
            return
        index = _as_int(lba)
        data = FAIL_BUFFER_READ_MESSAGE
        if self.command_buffer.valid_count() > 0:
            data = self.command_buffer.read(index)
        if data == FAIL_BUFFER_READ_MESSAGE:
            if not self.nand.exists():
                self.recorder.record_zero()
                return
            data = f"0x{self.nand.read(index):08X}"
        else:
            data = _uppercase_after_prefix(data)
        self.recorder.record_success(data)

    def erase(self, lba: int | str, scope: int | str) -> None:
        """Queue an erase of ``scope`` blocks from ``lba``; scope may be negative."""
        lba, scope = str(lba), str(scope)
        if not self.validator.is_number_within_range(scope, 1, 10, True):
            self._record_error()
            return
        if not self.validator.is_number_within_range(lba, MIN_LBA, MAX_LBA):
            self._record_error()
            return
        start = _as_int(lba)
        size = _as_int(scope)
        end = start + size - 1
        if not self.validator.is_number_within_range(str(end), MIN_LBA, MAX_LBA):
            self._record_error()
            return
        if size < 0:
            start, size = end, abs(size)
        if self.command_buffer.is_full():
            self.flush()
        self.command_buffer.add_command(f"E {start} {size}")

    def flush(self) -> None:
        """Apply every buffered command to the NAND storage."""
        self.command_buffer.flush(self.nand, self.recorder, self.validator)

    def invalid_command(self, message: str) -> None:
        """Record an error for a command that could not be understood."""
        self.validator.error_reason = message
        self._record_error()

    def reset_result(self) -> None:
        """Forget the last result."""
        self.recorder.reset()

    def clear_command_buffer(self) -> None:
        """Discard all buffered commands without applying them."""
        self.command_buffer.clear()