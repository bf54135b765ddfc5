"""Buffer of pending write and erase commands, persisted as file names."""

import shutil
from pathlib import Path

from .buffer_commands import BufferedErase, BufferedWrite, parse_command
from .nand import NandStorage
from .recorder import Recorder
from .ssd_config import (
    COMMAND_BUFFER_FOLDER_NAME,
    FAIL_BUFFER_READ_MESSAGE,
    MAX_BUFFER_SIZE,
    ZERO_PATTERN,
)
from .validator import Validator

Command = BufferedWrite | BufferedErase

_EMPTY = "empty"


def _lba_map(commands: list[Command]) -> dict[int, str]:
    """Replay commands in order into an LBA-to-value map."""
    lba_map: dict[int, str] = {}
    for command in commands:
        command.apply(lba_map)
    return lba_map


def _compact(lba_map: dict[int, str]) -> list[Command]:
    """Rebuild a minimal command list: erases first, then writes.

    An erase run starts at a zeroed LBA and extends over every following
    consecutive LBA in the map; writes inside the run are replayed afterwards.
    """
    runs: list[list[int]] = []
    current: list[int] | None = None
    previous: int | None = None
    for lba in sorted(lba_map):
        if current is not None and previous is not None and lba == previous + 1:
            current[1] += 1
        else:
            current = None
            if lba_map[lba] == ZERO_PATTERN:
                current = [lba, 1]
                runs.append(current)
        previous = lba

    commands: list[Command] = [BufferedErase(start, count) for start, count in runs]
    commands.extend(
        BufferedWrite(lba, value)
        for lba, value in sorted(lba_map.items())
        if value != ZERO_PATTERN
    )
    return commands


class CommandBuffer:
    """Holds up to five pending commands, one file name per slot."""

    def __init__(self, buffer_dir: str | Path = COMMAND_BUFFER_FOLDER_NAME) -> None:
        self.directory = Path(buffer_dir)
        self.commands: list[Command] = []
        if self.directory.exists():
            self._refresh()
        else:
            self._initialize_empty()

    def _initialize_empty(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        for slot in range(1, MAX_BUFFER_SIZE + 1):
            (self.directory / f"{slot}_{_EMPTY}").touch()

    def _save(self) -> None:
        self.destroy()
        self.directory.mkdir(parents=True, exist_ok=True)
        names = [str(command) for command in self.commands[:MAX_BUFFER_SIZE]]
        names.extend([_EMPTY] * (MAX_BUFFER_SIZE - len(names)))
        for slot, name in enumerate(names, start=1):
            (self.directory / f"{slot}_{name}").touch()

    def _indexed_entries(self) -> list[tuple[int, str]]:
        entries = []
        for entry in self.directory.iterdir():
            if not entry.is_file():
                continue
            index, sep, text = entry.name.partition("_")
            if not sep or not index.isdigit():
                continue
            entries.append((int(index), text))
        return sorted(entries)

    def _refresh(self) -> dict[int, str]:
        self.commands = self.load_commands()
        return _lba_map(self.commands)

    def load_commands(self) -> list[Command]:
        """Read the commands stored in the buffer directory, in slot order."""
        commands = []
        for _, text in self._indexed_entries():
            if _EMPTY in text:
                continue
            command = parse_command(text)
            if command is not None:
                commands.append(command)
        return commands

    def add_command(self, command: str) -> None:
        """Queue a ``W`` or ``E`` command and merge it with what is pending."""
        if not command or command[0] not in ("W", "E"):
            return
        parsed = parse_command(command)
        if parsed is not None:
            self.commands.append(parsed)
        self._save()
        self.commands = _compact(self._refresh())
        self._save()

    def read(self, lba: int | str) -> str:
        """Return the buffered value at ``lba``, or the not-in-buffer message."""
        index = int(lba)
        return self._refresh().get(index, FAIL_BUFFER_READ_MESSAGE)

    def is_full(self) -> bool:
        """Return True when every slot holds a command."""
        return len(self.commands) == MAX_BUFFER_SIZE

    def flush(self, nand: NandStorage, recorder: Recorder, validator: Validator) -> None:
        """Apply every pending command to the NAND storage and empty the buffer."""
        for command in self.commands:
            command.execute(nand, recorder, validator)
        self.clear()

    def clear(self) -> None:
        """Drop all pending commands and reset the directory to empty slots."""
        self.commands.clear()
        self.destroy()
        self._initialize_empty()

    def destroy(self) -> None:
        """Remove the buffer directory entirely."""
        if self.directory.exists():
            shutil.rmtree(self.directory)

    def valid_count(self) -> int:
        """Count the slots that hold a command, creating the directory if missing."""
        if not self.directory.exists():
            self.directory.mkdir(parents=True)
            return 0
        return sum(
            1
            for entry in self.directory.iterdir()
            if entry.is_file() and "_empty" not in entry.name
        )