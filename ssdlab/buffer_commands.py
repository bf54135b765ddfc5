"""Write and erase commands held in the command buffer."""

from dataclasses import dataclass

from .nand import NandStorage
from .recorder import Recorder
from .ssd_config import MAX_LBA, ZERO_PATTERN
from .validator import Validator

_WRITE_FAIL = " ### Write Fail (about File) ### "
_OVER_MAX = "### Last LBA is over Max LBA ###"


def _write_cell(nand: NandStorage, lba: int, value: str, recorder: Recorder, validator: Validator) -> None:
    try:
        nand.write(lba, value)
    except OSError:
        validator.error_reason = _WRITE_FAIL
        recorder.record_error(validator.error_reason)


@dataclass(frozen=True)
class BufferedWrite:
    """Write ``value`` to ``lba``."""

    lba: int
    value: str

    def __str__(self) -> str:
        return f"W {self.lba} {self.value}"

    def apply(self, lba_map: dict[int, str]) -> None:
        """Record the effect of this command in an LBA-to-value map."""
        lba_map[self.lba] = self.value

    def execute(self, nand: NandStorage, recorder: Recorder, validator: Validator) -> None:
        """Perform the write on the NAND storage."""
        _write_cell(nand, self.lba, self.value, recorder, validator)


@dataclass(frozen=True)
class BufferedErase:
    """Zero ``size`` blocks starting at ``lba``; a negative size counts backwards."""

    lba: int
    size: int

    def __str__(self) -> str:
        return f"E {self.lba} {self.size}"

    @property
    def span(self) -> range:
        """The LBAs this command erases."""
        last = self.lba + self.size - 1
        return range(min(self.lba, last), max(self.lba, last) + 1)

    def apply(self, lba_map: dict[int, str]) -> None:
        """Record the effect of this command in an LBA-to-value map."""
        for lba in self.span:
            lba_map[lba] = ZERO_PATTERN

    def execute(self, nand: NandStorage, recorder: Recorder, validator: Validator) -> None:
        """Zero the erased blocks, refusing a range past the last LBA."""
        span = self.span
        if span[-1] > MAX_LBA:
            validator.error_reason = _OVER_MAX
            recorder.record_error(validator.error_reason)
            return
        for lba in span:
            _write_cell(nand, lba, ZERO_PATTERN, recorder, validator)


def _int_field(tokens: list[str], index: int) -> int | None:
    if index >= len(tokens):
        return None
    try:
        return int(tokens[index])
    except ValueError:
        return None


def parse_command(text: str) -> BufferedWrite | BufferedErase | None:
    """Build a command from ``"W <lba> <value>"`` or ``"E <lba> <size>"``.

    Returns None for any other command type. Missing or unreadable fields
    default to 0 or the empty string.
    """
    tokens = text.split()
    if not tokens or tokens[0] not in ("W", "E"):
        return None
    lba = _int_field(tokens, 1)
    if tokens[0] == "W":
        if lba is None:
            return BufferedWrite(0, "")
        value = tokens[2] if len(tokens) > 2 else ""
        return BufferedWrite(lba, value)
    if lba is None:
        return BufferedErase(0, 0)
    size = _int_field(tokens, 2)
    return BufferedErase(lba, 0 if size is None else size)