"""The exit and help commands of the test shell."""

from collections.abc import Iterable

from .shell_command import ShellCommand
from .shell_log import Logger


def _print_lines(text: str) -> None:
    """Print each line of ``text`` indented by a tab."""
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        print(f"\t{line}")


class ExitCommand(ShellCommand):
    """Stop the interactive shell."""

    name = "exit"
    usage = "exit\n"
    description = "Exit the program\n"

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger
        self.is_active = True

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return len(args) == 0

    def execute(self, cmd: str, args: list[str]) -> bool:
        """Mark the shell inactive; fails if arguments were given."""
        if not self.is_valid_arguments(cmd, args):
            return False
        self.is_active = False
        return True


class HelpCommand(ShellCommand):
    """Print the description and usage of every supported command."""

    name = "help"
    usage = "help\n"
    description = "Display Help for commands\n"

    def __init__(self, logger: Logger | None = None) -> None:
        self.logger = logger
        self.supported: list[ShellCommand] = []

    def set_supported_commands(self, commands: Iterable[ShellCommand]) -> None:
        """Replace the commands listed by help."""
        self.supported = list(commands)

    def is_valid_arguments(self, cmd: str, args: list[str]) -> bool:
        return True

    def execute(self, cmd: str, args: list[str]) -> bool:
        print("-- Command Help ---------------------------------------")
        for command in self.supported:
            print(f"[{command.name}]")
            print("Description:")
            _print_lines(command.description)
            print("Usage:")
            _print_lines(command.usage)
            print("\n")
        return True