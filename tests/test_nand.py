import pytest

from ssdlab.nand import NandStorage
from ssdlab.ssd_config import LBA_SIZE, MAX_LBA


@pytest.fixture
def nand(tmp_path):
    return NandStorage(tmp_path / "ssd_nand.txt")


def test_read_without_file_is_zero(nand):
    assert nand.exists() is False
    assert nand.read(0) == 0


def test_first_write_creates_initialized_file(nand):
    nand.write("0", "0x12345678")
    assert nand.exists() is True
    assert nand.path.stat().st_size == MAX_LBA * LBA_SIZE


def test_write_read_round_trip(nand):
    nand.write("5", "0x12345678")
    assert nand.read("5") == 0x12345678
    assert nand.read("4") == 0


def test_stored_little_endian(nand):
    nand.write(0, "0x12345678")
    assert nand.path.read_bytes()[:4] == b"\x78\x56\x34\x12"


def test_last_lba_round_trip(nand):
    nand.write("99", "0xFFFFFFFF")
    assert nand.read("99") == 0xFFFFFFFF


def test_lowercase_pattern(nand):
    nand.write(3, "0xabcdef01")
    assert nand.read(3) == 0xABCDEF01


def test_overwrite(nand):
    nand.write(1, "0x11111111")
    nand.write(1, "0x00000000")
    assert nand.read(1) == 0


def test_read_beyond_file_is_zero(nand):
    nand.write(0, "0x12345678")
    assert nand.read(MAX_LBA) == 0


def test_write_into_directory_raises(tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    with pytest.raises(OSError):
        NandStorage(target).write(0, "0x12345678")


def test_invalid_pattern_raises(nand):
    with pytest.raises(ValueError):
        nand.write(0, "0xZZZZZZZZ")