"""Base classes for test-shell commands and the parsed prompt input."""

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .shell_log import Logger
from .ssd_config import OUTPUT_FILE_NAME

SSD_PROGRAM = "ssd.exe"

Runner = Callable[[str], int]


def _run_shell(command: str) -> int:
    """Run ``command`` through the shell and return its exit status."""
    return subprocess.run(command, shell=True, check=False).returncode


@dataclass
class PromptInput:
    """A command name and its arguments as typed at the prompt."""

    cmd: str = ""
    args: list[str] = field(default_factory=list)


class ShellCommand(ABC):
    """A command the test shell can recognise and run."""

    name: str = ""
    usage: str = ""
    description: str = ""

    def matches(self, command: str) -> bool:
        """Return True if ``command`` names this command."""
        return self.name == command

    @property
    def result_value(self) -> str:
        """A result left by the last run, empty by default."""
        return ""

    @abstractmethod
    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        """Return True if ``args`` suit this command."""

    @abstractmethod
    def execute(self, cmd: str, args: list[str]) -> bool:
        """Run the command; return True on success."""


class SsdCommand(ShellCommand):
    """A command carried out by starting the SSD program."""

    def __init__(
        self,
        logger: Logger | None = None,
        runner: Runner | None = None,
        output_path: str | Path = OUTPUT_FILE_NAME,
        program: str = SSD_PROGRAM,
    ) -> None:
        self.logger = logger
        self.runner = runner if runner is not None else _run_shell
        self.output_path = Path(output_path)
        self.program = program

    def _command_line(self, *parts: object) -> str:
        return " ".join([self.program, *(str(part) for part in parts)])

    def log_message(self, prefix: str, message: str) -> None:
        """Pass ``message`` to the logger, if there is one."""
        if self.logger is not None:
            self.logger.log(prefix, message)

    def call_system(self, command: str) -> int:
        """Run ``command`` and return its exit status."""
        return self.runner(command)

    def read_output(self) -> str:
        """Return the first line of the SSD output file, or "" if it is missing."""
        try:
            with self.output_path.open(encoding="utf-8") as fin:
                return fin.readline().rstrip("\r\n")
        except OSError:
            return ""