import pytest

from ssdlab.command_buffer import CommandBuffer
from ssdlab.controller import SsdController
from ssdlab.ssd_config import ERROR_PATTERN, OUTPUT_FILE_NAME, ZERO_PATTERN
from ssdlab.validator import Validator

VALUE_1 = "0x12345678"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def ssd(workdir):
    return SsdController()


def fill_all(ssd):
    for lba in range(100):
        ssd.write(str(lba), VALUE_1)


def test_erase_lba_0_size_1(ssd):
    fill_all(ssd)
    ssd.erase("0", "1")
    ssd.read("0")
    assert ssd.result == ZERO_PATTERN


def test_erase_lba_0_size_10(ssd):
    fill_all(ssd)
    ssd.erase("0", "10")
    for lba in range(10):
        ssd.read(str(lba))
        assert ssd.result == ZERO_PATTERN
    ssd.read("10")
    assert ssd.result == VALUE_1


def test_erase_lba_95_to_99(ssd):
    fill_all(ssd)
    ssd.erase("95", "5")
    for lba in range(95, 100):
        ssd.read(str(lba))
        assert ssd.result == ZERO_PATTERN


def test_erase_scope_11_fails(ssd):
    fill_all(ssd)
    ssd.erase("0", "11")
    assert ssd.result == ERROR_PATTERN


def test_erase_past_last_lba_fails(ssd):
    fill_all(ssd)
    ssd.erase("95", "6")
    assert ssd.result == ERROR_PATTERN


def test_erase_invalid_lba_fails(ssd):
    fill_all(ssd)
    ssd.erase("100", "10")
    assert ssd.result == ERROR_PATTERN


@pytest.mark.parametrize("lba", ["0", "99"])
def test_write_does_not_record(ssd, lba):
    ssd.write(lba, VALUE_1)
    assert ssd.result == ZERO_PATTERN


@pytest.mark.parametrize("lba", ["0", "99"])
def test_read_mapped(ssd, lba):
    ssd.write(lba, VALUE_1)
    ssd.read(lba)
    assert ssd.result == VALUE_1


def test_read_unmapped(ssd):
    ssd.read("0")
    assert ssd.result == ZERO_PATTERN


def test_read_creates_output_file(ssd, workdir):
    assert not (workdir / OUTPUT_FILE_NAME).exists()
    ssd.read("0")
    assert ssd.result == ZERO_PATTERN
    assert (workdir / OUTPUT_FILE_NAME).read_text() == ZERO_PATTERN + "\n"


def test_write_fail_out_of_range(ssd):
    ssd.write("100", VALUE_1)
    assert ssd.result == ERROR_PATTERN


def test_write_fail_short_pattern(workdir):
    validator = Validator()
    ssd = SsdController(validator=validator)
    ssd.write("0", "0x1")
    assert ssd.result == ERROR_PATTERN
    assert validator.error_reason == "### DataPattern Length is not 10 ###"


def test_write_fail_no_prefix(ssd):
    ssd.clear_command_buffer()
    ssd.write("0", "1234567890")
    assert ssd.result == ERROR_PATTERN


def test_read_other_lba_after_write(ssd):
    ssd.clear_command_buffer()
    ssd.write("0", VALUE_1)
    ssd.read("99")
    assert ssd.result == ZERO_PATTERN


def test_read_fail_out_of_range(ssd):
    ssd.read("100")
    assert ssd.result == ERROR_PATTERN


def test_erase_negative_size_accepted(ssd):
    ssd.erase("99", "-5")
    assert ssd.result == ZERO_PATTERN
    assert [str(c) for c in CommandBuffer("buffer").load_commands()] == ["E 93 5"]


def test_erase_negative_lba_fails(ssd):
    ssd.erase("-3", "1")
    assert ssd.result == ERROR_PATTERN


def test_erase_negative_size_below_zero_fails(ssd):
    ssd.erase("0", "-5")
    assert ssd.result == ERROR_PATTERN


def test_erase_negative_lba_and_size_fails(ssd):
    ssd.erase("-3", "-5")
    assert ssd.result == ERROR_PATTERN


def test_write_then_read_from_buffer(ssd):
    ssd.write("0", VALUE_1)
    ssd.read("0")
    assert ssd.result == VALUE_1


def test_write_then_erase_in_buffer(ssd):
    ssd.write("0", VALUE_1)
    ssd.erase("0", "1")
    ssd.read("0")
    assert ssd.result == ZERO_PATTERN


def test_implicit_flush(ssd):
    for lba in range(7):
        ssd.write(str(lba), VALUE_1)
    for lba in range(7):
        ssd.read(str(lba))
        assert ssd.result == VALUE_1


def test_read_uppercases_hex(ssd):
    ssd.write("4", "0xabcdef01")
    ssd.read("4")
    assert ssd.result == "0xABCDEF01"
    ssd.flush()
    ssd.read("4")
    assert ssd.result == "0xABCDEF01"


def test_flush_moves_data_to_nand(ssd):
    ssd.write("7", VALUE_1)
    ssd.flush()
    assert ssd.command_buffer.valid_count() == 0
    assert ssd.nand.read(7) == 0x12345678


def test_invalid_command_records_error(workdir):
    validator = Validator()
    ssd = SsdController(validator=validator)
    ssd.invalid_command("### bad command ###")
    assert ssd.result == ERROR_PATTERN
    assert validator.error_reason == "### bad command ###"


def test_reset_result(ssd):
    ssd.read("100")
    ssd.reset_result()
    assert ssd.result == ZERO_PATTERN


def test_not_decimal_lba(workdir):
    validator = Validator()
    ssd = SsdController(validator=validator)
    ssd.read("abc")
    assert ssd.result == ERROR_PATTERN
    assert validator.error_reason == "### Not decimal ###"