"""Argument checks for the SSD simulator."""

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _leading_int(text: str) -> int | None:
    """Parse a leading decimal integer the way a C ``stoi`` does, or return None."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


class Validator:
    """Checks LBAs, scopes and data patterns, remembering why the last check failed."""

    def __init__(self) -> None:
        self.error_reason = ""

    def is_number_within_range(
        self, text: str, min_num: int, max_num: int, is_scope: bool = False
    ) -> bool:
        """Return True if ``text`` holds a number in ``[min_num, max_num]``.

        A scope is compared by its absolute value.
        """
        num = _leading_int(text)
        if num is None:
            self.error_reason = "### Not decimal ###"
            return False
        if is_scope:
            num = abs(num)
        if min_num <= num <= max_num:
            return True
        self.error_reason = "### Out of range ###"
        return False

    def is_valid_data_pattern(self, pattern: str) -> bool:
        """Return True if ``pattern`` is ``0x`` followed by eight hex digits."""
        if len(pattern) != 10:
            self.error_reason = "### DataPattern Length is not 10 ###"
            return False
        if not pattern.startswith("0x"):
            self.error_reason = "### DataPattern Is not started with '0x' ###"
            return False
        if not all(ch in _HEX_DIGITS for ch in pattern[2:]):
            self.error_reason = "### DataPattern Is not Hex number ###"
            return False
        return True