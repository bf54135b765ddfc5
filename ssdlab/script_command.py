"""Commands made of a sequence of other commands."""

import copy
from abc import abstractmethod
from collections.abc import Iterable

from .shell_command import ShellCommand

NOT_PROVIDED = "Not provided.\n"


class ScriptCommand(ShellCommand):
    """A named script that runs its commands in order, stopping at the first failure.

    It answers to its full name or to the first two characters of it.
    """

    def __init__(
        self,
        name: str | None = None,
        usage: str = "",
        description: str = "",
        scripts: Iterable[tuple[ShellCommand, list[str]]] = (),
    ) -> None:
        if name is not None:
            self.name = name
        self._usage = usage
        self._description = description
        self.scripts: list[tuple[ShellCommand, list[str]]] = []
        for command, args in scripts:
            self.add_execution(command, args)

    @property
    def usage(self) -> str:
        """The usage text, or a placeholder when none was given."""
        return self._usage or NOT_PROVIDED

    @usage.setter
    def usage(self, value: str) -> None:
        self._usage = value

    @property
    def description(self) -> str:
        """The description, or a placeholder when none was given."""
        return self._description or NOT_PROVIDED

    @description.setter
    def description(self, value: str) -> None:
        self._description = value

    def matches(self, command: str) -> bool:
        return command == self.name or self.name[:2] == command

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return self.matches(cmd)

    def execute(self, cmd: str, args: list[str]) -> bool:
        if not self.is_valid_arguments(cmd, args):
            return False
        return self.execute_script()

    def add_execution(self, command: ShellCommand, args: Iterable[str]) -> None:
        """Append ``command`` with ``args`` to the script."""
        self.scripts.append((command, list(args)))

    def execute_script(self) -> bool:
        """Run every step in order; return False as soon as one fails."""
        return all(command.execute(command.name, args) for command, args in self.scripts)

    def clone(self) -> "ScriptCommand":
        """Return a copy with its own step list sharing the same commands."""
        duplicate = copy.copy(self)
        duplicate.scripts = list(self.scripts)
        return duplicate


class ScriptFunction(ScriptCommand):
    """A script building block opened by its name and closed by ``End<name>``."""

    @property
    def start_keyword(self) -> str:
        """The keyword that opens this block."""
        return self.name

    @property
    def finish_keyword(self) -> str:
        """The keyword that closes this block."""
        return "End" + self.start_keyword

    @abstractmethod
    def clone_instance(self) -> "ScriptFunction":
        """Return a fresh copy of this function for use in a new script."""