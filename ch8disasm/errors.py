from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Every way a disassembly run can fail."""

    EMPTY_INPUT = "EmptyInput"
    ODD_LENGTH = "OddLength"
    INPUT_NOT_FOUND = "InputNotFound"
    INPUT_UNREADABLE = "InputUnreadable"
    OUTPUT_UNWRITABLE = "OutputUnwritable"


class DisasmError(Exception):
    """Base exception for the disassembler."""

    kind: ErrorKind
    default_message = "Disassembly failed"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        message = self.default_message
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EmptyInputError(DisasmError):
    kind = ErrorKind.EMPTY_INPUT
    default_message = "Error parsing rom: empty rom"


class OddLengthError(DisasmError):
    kind = ErrorKind.ODD_LENGTH
    default_message = "Error parsing rom: uneven number of bytes"


class InputNotFoundError(DisasmError):
    kind = ErrorKind.INPUT_NOT_FOUND
    default_message = "Error reading input file. Does the file exist?"


class InputUnreadableError(DisasmError):
    kind = ErrorKind.INPUT_UNREADABLE
    default_message = "Error reading input file. Does the file exist?"


class OutputUnwritableError(DisasmError):
    kind = ErrorKind.OUTPUT_UNWRITABLE
    default_message = (
        "Error writing output file. Is it being used by another process?"
    )


__all__ = [
    "ErrorKind",
    "DisasmError",
    "EmptyInputError",
    "OddLengthError",
    "InputNotFoundError",
    "InputUnreadableError",
    "OutputUnwritableError",
]
