"""Read, write, full read/write and flush commands of the test shell."""

import re

from .shell_command import SsdCommand
from .ssd_config import MAX_LBA, MIN_LBA

_HEX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")
_ERROR_STATUS = 1


def _parse_hex(text: str) -> int:
    """Parse a leading hexadecimal number, with or without ``0x``, as 32 bits."""
    match = _HEX.match(text)
    if match is None:
        raise ValueError(f"not a hex number: {text!r}")
    return int(match.group(1), 16) & 0xFFFFFFFF


class ReadCommand(SsdCommand):
    """Read one LBA; with a second argument, compare it with an expected value."""

    name = "read"
    usage = "read <LBA>"
    description = "Reads the data stored at the given LBA."

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return len(args) == 1

    def execute(self, cmd: str, args: list[str]) -> bool:
        """Read ``args[0]``; return False on error or on a failed comparison.

        Raises ValueError if a comparison value or the output is not hex.
        """
        where = "ReadCommand.Execute()"
        line = self._command_line("R", args[0])
        self.log_message(where, f"[READ] {line}")
        if self.call_system(line) == _ERROR_STATUS:
            self.log_message(where, "[READ] ERROR")
            return False

        output = self.read_output()
        self.log_message(where, f"[READ] {output}")

        if len(args) >= 2:
            expected = _parse_hex(args[1])
            actual = _parse_hex(output)
            if expected != actual:
                self.log_message(
                    where, f"mismatch: expected 0x{expected:x} actual 0x{actual:x}"
                )
                return False
        return True


class WriteCommand(SsdCommand):
    """Write a pattern to one LBA."""

    name = "write"
    usage = "write <LBA> <PATTERN> : stores the pattern at the given LBA."
    description = ""

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return len(args) == 2

    def execute(self, cmd: str, args: list[str]) -> bool:
        where = "WriteCommand.Execute()"
        line = self._command_line("W", args[0], args[1])
        self.log_message(where, f"[WRITE] {line}")
        if self.call_system(line) == _ERROR_STATUS:
            self.log_message(where, "[WRITE] ERROR")
            return False
        self.read_output()
        self.log_message(where, "[WRITE] COMPLETED!")
        return True


class FullReadCommand(SsdCommand):
    """Read every LBA in turn."""

    name = "fullread"
    usage = "fullread"
    description = "Reads and prints the whole LBA range."

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return not args

    def execute(self, cmd: str, args: list[str]) -> bool:
        where = "FullReadCommand.Execute()"
        for lba in range(MIN_LBA, MAX_LBA + 1):
            line = self._command_line("R", lba)
            self.log_message(where, f"[FULLREAD] {line}")
            if self.call_system(line) == _ERROR_STATUS:
                self.log_message(where, "[FULLREAD] ERROR")
                continue
            self.log_message(where, f"[FULLREAD] {self.read_output()}")
        return True


class FullWriteCommand(SsdCommand):
    """Write one pattern to every LBA."""

    name = "fullwrite"
    usage = "fullwrite <PATTERN>"
    description = "Stores the given pattern in the whole LBA range."

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return len(args) == 1

    def execute(self, cmd: str, args: list[str]) -> bool:
        where = "FullWriteCommand.Execute()"
        for lba in range(MIN_LBA, MAX_LBA + 1):
            line = self._command_line("W", lba, args[0])
            self.log_message(where, f"[FULLWRITE] {line}")
            if self.call_system(line) == _ERROR_STATUS:
                self.log_message(where, "[FULLWRITE] ERROR")
                continue
            self.read_output()
            self.log_message("WriteCommand.Execute()", "[WRITE] COMPLETED!")
        return True


class FlushCommand(SsdCommand):
    """Apply every buffered command on the SSD."""

    name = "flush"
    usage = "flush"
    description = "Runs every command in the command buffer and empties it."

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return not args

    def execute(self, cmd: str, args: list[str]) -> bool:
        where = "FlushCommand.Execute()"
        line = self._command_line("F")
        self.log_message(where, f"[FLUSH] {line}")
        if self.call_system(line) == _ERROR_STATUS:
            self.log_message(where, "[FLUSH] ERROR")
            return False
        self.log_message(where, "[FLUSH] COMPLETED!")
        return True