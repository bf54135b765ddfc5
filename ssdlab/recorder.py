"""Writes the result of each SSD operation to the output file."""

from pathlib import Path

from .ssd_config import ERROR_PATTERN, OUTPUT_FILE_NAME, ZERO_PATTERN


class Recorder:
    """Keeps the last result and mirrors it into the output file."""

    def __init__(self, output_path: str | Path = OUTPUT_FILE_NAME, debug: bool = False) -> None:
        self.output_path = Path(output_path)
        self.debug = debug
        self.result = ZERO_PATTERN

    def _write(self, content: str, error_message: str = "") -> None:
        self.result = content
        try:
            with self.output_path.open("w", encoding="utf-8") as out:
                out.write(content + "\n")
                if self.debug and error_message:
                    out.write(error_message + "\n")
        except OSError:
            pass

    def record_error(self, error_message: str) -> None:
        """Record the error pattern; the message is written only in debug mode."""
        self._write(ERROR_PATTERN, error_message)

    def record_zero(self) -> None:
        """Record the all-zero pattern."""
        self._write(ZERO_PATTERN)

    def record_success(self, value: str) -> None:
        """Record a value that was read."""
        self._write(value)

    def reset(self) -> None:
        """Forget the last result without touching the file."""
        self.result = ZERO_PATTERN