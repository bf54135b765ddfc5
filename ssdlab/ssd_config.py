"""Names, limits and patterns shared by the SSD simulator."""

OUTPUT_FILE_NAME = "ssd_output.txt"
NAND_FILE_NAME = "ssd_nand.txt"
COMMAND_BUFFER_FOLDER_NAME = "buffer"

ZERO_PATTERN = "0x00000000"
ERROR_PATTERN = "ERROR"
FAIL_BUFFER_READ_MESSAGE = "DATA_IS_NOT_IN_BUFFER"

MIN_LBA = 0
MAX_LBA = 99
LBA_SIZE = 4  # bytes per logical block
MAX_BUFFER_SIZE = 5