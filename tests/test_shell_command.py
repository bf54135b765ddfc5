import pytest

from ssdlab.shell_command import SSD_PROGRAM, PromptInput, ShellCommand, SsdCommand
from ssdlab.shell_log import LOG_FILE_NAME, Logger


class EchoCommand(ShellCommand):
    name = "echo"
    usage = "echo <ARG>"

    def is_valid_arguments(self, cmd, args):
        return len(args) == 1

    def execute(self, cmd, args):
        return self.is_valid_arguments(cmd, args)


class ProbeCommand(SsdCommand):
    name = "probe"

    def is_valid_arguments(self, cmd, args):
        return not args

    def execute(self, cmd, args):
        return self.call_system(self._command_line("R", 0)) == 0


def test_prompt_input_defaults_are_independent():
    first = PromptInput()
    second = PromptInput()
    first.args.append("x")
    assert first.cmd == ""
    assert second.args == []


def test_prompt_input_holds_values():
    prompt = PromptInput("exit", ["a"])
    assert prompt.cmd == "exit"
    assert prompt.args == ["a"]


def test_shell_command_is_abstract():
    with pytest.raises(TypeError):
        ShellCommand()


def test_matches_by_name():
    command = EchoCommand()
    assert ShellCommand.matches(command, "echo") is True
    assert ShellCommand.matches(command, "ech") is False
    assert command.result_value == ""


def test_call_system_uses_runner():
    calls = []

    def runner(line):
        calls.append(line)
        return 0

    command = ProbeCommand(runner=runner)
    assert SsdCommand.call_system(command, f"{SSD_PROGRAM} W 1 0x00000001") == 0
    assert command.execute("probe", []) is True
    assert calls == [f"{SSD_PROGRAM} W 1 0x00000001", f"{SSD_PROGRAM} R 0"]


def test_call_system_returns_runner_status():
    command = ProbeCommand(runner=lambda line: 1)
    assert SsdCommand.call_system(command, "anything") == 1
    assert command.execute("probe", []) is False


def test_default_runner_reports_exit_status():
    command = ProbeCommand()
    assert SsdCommand.call_system(command, "exit 3") == 3


def test_read_output_first_line(tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("0x12345678\nsecond\n", encoding="utf-8")
    command = ProbeCommand(output_path=out)
    assert SsdCommand.read_output(command) == "0x12345678"


def test_read_output_missing_file(tmp_path):
    command = ProbeCommand(output_path=tmp_path / "missing.txt")
    assert SsdCommand.read_output(command) == ""


def test_log_message_goes_to_logger(tmp_path):
    logger = Logger(enabled=True, directory=tmp_path)
    command = ProbeCommand(logger=logger)
    command.log_message("Probe.Execute()", "[PROBE] done")
    text = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "Probe.Execute()" in text
    assert text.rstrip("\n").endswith("[PROBE] done")


def test_log_message_without_logger_is_silent(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    SsdCommand.log_message(ProbeCommand(), "p", "m")
    assert capsys.readouterr().out == ""
    assert list(tmp_path.iterdir()) == []