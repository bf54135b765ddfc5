# ssdlab

`ssdlab` has two parts.

* **A simulated SSD.** It has 100 logical blocks (LBA 0–99). Each block holds a 32-bit value.
  Writes and erases first go into a command buffer with five slots. The buffer is kept on
  disk as file names in a `buffer/` directory. The buffer is flushed to the NAND image file
  `ssd_nand.txt` when it is full or when you ask for it. The result of each operation goes
  to `ssd_output.txt`.
* **Test-shell commands.** These are command objects that drive an SSD program by starting
  it as a separate process. Commands can be combined into named scripts.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the SSD from Python

```python
from ssdlab.controller import SsdController

ssd = SsdController()
ssd.write("3", "0x12345678")
ssd.read("3")
print(ssd.result)        # 0x12345678
ssd.erase("0", "5")      # erase LBA 0..4
ssd.flush()              # apply buffered commands to the NAND image
```

The controller does not raise for an invalid LBA, an erase size outside 1–10 (a negative size
erases backwards), or a pattern that is not `0x` followed by eight hex digits. In each of these
cases it records `ERROR` as the result.

You can use the parts of the SSD on their own:

* `ssdlab.command_buffer.CommandBuffer`: the five-slot buffer. It merges and compacts the
  pending writes and erases.
* `ssdlab.buffer_commands`: `BufferedWrite`, `BufferedErase` and `parse_command`.
* `ssdlab.nand.NandStorage`: one little-endian 32-bit word per LBA, stored in a single file.
* `ssdlab.validator.Validator`: checks numbers and data patterns.
* `ssdlab.recorder.Recorder`: stores the last result and writes it to the output file.

## Test-shell commands

Each command has a `name`, a `usage` and a `description`. It also has these methods:

* `matches(command)`
* `is_valid_arguments(cmd, args)`
* `execute(cmd, args)`, which returns `True` on success.

| Class | Module | Arguments |
|---|---|---|
| `ReadCommand` | `ssdlab.io_commands` | `<LBA> [EXPECTED]` |
| `WriteCommand` | `ssdlab.io_commands` | `<LBA> <PATTERN>` |
| `FullReadCommand` | `ssdlab.io_commands` | none |
| `FullWriteCommand` | `ssdlab.io_commands` | `<PATTERN>` |
| `FlushCommand` | `ssdlab.io_commands` | none |
| `EraseCommand` | `ssdlab.erase_commands` | `<LBA> <SIZE>` |
| `EraseRangeCommand` | `ssdlab.erase_commands` | `<START_LBA> <END_LBA>` |
| `ExitCommand` | `ssdlab.basic_commands` | none |
| `HelpCommand` | `ssdlab.basic_commands` | none |

How the commands that talk to the SSD program work:

* They build command lines such as `ssd.exe R 3`.
* They run each command line through the system shell.
* They read the first line of `ssd_output.txt`.

You can replace the runner. For example, you can pass a function in a test:

```python
from ssdlab.io_commands import ReadCommand

calls = []
read = ReadCommand(runner=lambda line: calls.append(line) or 0)
read.execute("read", ["3"])
print(calls)             # ['ssd.exe R 3']
```

An exit status of `1` counts as an error. Pass a `ssdlab.shell_log.Logger` to log each step.
The logger writes to the console and to `latest.log`. When `latest.log` reaches 10 KiB, it is
renamed to `until_<timestamp>.log`. Once two or more `.log` files exist, the oldest one is
renamed to `.zip`.

`ssdlab.script_command.ScriptCommand` runs a list of `(command, args)` steps in order. It stops
at the first step that fails. A script command answers to its full name and also to the first
two characters of its name. `ScriptFunction` is the abstract base for script building blocks.
Each building block is closed by `End<name>`.

## What is not included

The package has no interactive prompt and no command-line entry point. You create and call
the commands from Python.

The package does not include these script features:

* It does not load scripts from a `scripts/` directory.
* It does not provide the `WriteFunc`, `EraseFunc` or `Loop` script helpers.

The package does not ship a device program for the commands to start. You need to provide
`ssd.exe` yourself, or give the commands a runner of your own.