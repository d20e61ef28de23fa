"""Hardware platforms a source file can be built for."""

from enum import StrEnum


class Hardware(StrEnum):
    GENERIC = "GENERIC"
    APPLE2 = "APPLE2"
    ATARI2600 = "ATARI2600"
    ATARI7800 = "ATARI7800"
    ATARI8BIT = "ATARI8BIT"
    C64 = "C64"
    NES = "NES"
    TEST = "TEST"


def default_executable_extension(hardware: Hardware) -> str:
    """File extension of a program built for `hardware`, empty when there is no convention."""
    match hardware:
        case Hardware.APPLE2:
            # DOS 3.3 binary: start-lo, start-hi, length-lo, length-hi, data
            return ".b"
        case Hardware.ATARI2600 | Hardware.ATARI7800:
            return ".bin"
        case Hardware.ATARI8BIT:
            # DOS 2.5 compound file: $ff, $ff, start-lo, start-hi, end-lo, end-hi, data
            return ".xex"
        case Hardware.C64:
            return ".prg"
        case Hardware.NES:
            return ".nes"
        case Hardware.TEST:
            return ".tst"
        case _:
            return ""
