"""Console and file logging for the test shell, with size-based rotation."""

from datetime import datetime
from pathlib import Path

LOG_FILE_NAME = "latest.log"
ROTATE_SIZE = 10 * 1024
_MAX_MESSAGE = 1023
_PREFIX_WIDTH = 30


class Logger:
    """Writes log lines to the console and to ``latest.log`` in ``directory``.

    When the log file reaches 10 KiB it is renamed to ``until_<time>.log``;
    if two or more ``.log`` files then exist, the oldest is renamed to ``.zip``.
    """

    ENABLE_LOG = True
    DISABLE_LOG = False

    def __init__(self, enabled: bool = False, directory: str | Path = ".") -> None:
        self.enabled = enabled
        self.directory = Path(directory)

    @property
    def log_path(self) -> Path:
        """The file that receives new log lines."""
        return self.directory / LOG_FILE_NAME

    def timestamp(self) -> str:
        """Return the current local time as ``yy.mm.dd HH.MM.SS``."""
        return datetime.now().strftime("%y.%m.%d %H.%M.%S")

    def format_prefix(self, classname: str) -> str:
        """Return the ``[time] classname:`` header that starts each log line."""
        now = datetime.now().strftime("%y.%m.%d %H.%M")
        return f"[{now}] {classname:<{_PREFIX_WIDTH}}:"

    def archive_oldest(self) -> None:
        """Rename the oldest ``.log`` file to ``.zip`` when two or more exist."""
        logs = [
            entry
            for entry in self.directory.iterdir()
            if entry.is_file() and entry.suffix == ".log"
        ]
        if len(logs) < 2:
            return
        oldest = min(logs, key=lambda entry: entry.stat().st_mtime)
        oldest.replace(oldest.with_suffix(".zip"))

    def log(self, prefix: str, message: str) -> None:
        """Write ``message`` under ``prefix`` to the console and the log file."""
        if not self.enabled:
            return
        line = self.format_prefix(prefix) + message[:_MAX_MESSAGE]
        print(line)

        log_path = self.log_path
        size = log_path.stat().st_size if log_path.exists() else 0
        if size >= ROTATE_SIZE:
            log_path.replace(self.directory / f"until_{self.timestamp()}.log")
            self.archive_oldest()

        try:
            with log_path.open("a", encoding="utf-8") as out:
                out.write(line + "\n")
        except OSError:
            pass