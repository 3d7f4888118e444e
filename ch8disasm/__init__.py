"""
CHIP-8 ROM disassembler.

A ROM image is split into big-endian 16-bit words (``coding``), every word is
matched against the ordered instruction table (``decode_map``) and the
resulting mnemonics are joined into a newline-terminated listing (``disasm``).
"""

from .coding import BufferTooShort, WordDecoder, frame, iter_words  # noqa: F401
from .config import DisasmConfig, load_config  # noqa: F401
from .decode_map import (  # noqa: F401
    DEFAULT_FALLBACK,
    PATTERNS,
    DecodedInstr,
    FallbackStyle,
    Fields,
    Pattern,
    decode,
    decode_instruction,
)
from .disasm import frame_and_decode, read_rom, run, write_listing  # noqa: F401
from .errors import (  # noqa: F401
    DisasmError,
    EmptyInputError,
    ErrorKind,
    InputNotFoundError,
    InputUnreadableError,
    OddLengthError,
    OutputUnwritableError,
)

__all__ = [
    "BufferTooShort",
    "WordDecoder",
    "frame",
    "iter_words",
    "DisasmConfig",
    "load_config",
    "DEFAULT_FALLBACK",
    "PATTERNS",
    "DecodedInstr",
    "FallbackStyle",
    "Fields",
    "Pattern",
    "decode",
    "decode_instruction",
    "frame_and_decode",
    "read_rom",
    "run",
    "write_listing",
    "DisasmError",
    "EmptyInputError",
    "ErrorKind",
    "InputNotFoundError",
    "InputUnreadableError",
    "OddLengthError",
    "OutputUnwritableError",
]
