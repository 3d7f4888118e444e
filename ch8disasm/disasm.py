from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, Optional

from .coding import ByteSource, frame
from .config import DisasmConfig
from .decode_map import DEFAULT_FALLBACK, FallbackStyle, decode
from .errors import InputNotFoundError, InputUnreadableError, OutputUnwritableError

logger = logging.getLogger(__name__)


def disassemble_words(
    words: Iterable[int], fallback: FallbackStyle = DEFAULT_FALLBACK
) -> Iterator[str]:
    for word in words:
        yield decode(word, fallback)


def frame_and_decode(
    data: ByteSource, fallback: FallbackStyle = DEFAULT_FALLBACK
) -> str:
    """Disassemble a whole ROM image into newline-terminated listing text.

    Raises ``EmptyInputError`` or ``OddLengthError`` before anything is decoded.
    """
    words = frame(data)
    logger.debug("Framed %d bytes into %d words", len(data), len(words))
    return "".join(f"{line}\n" for line in disassemble_words(words, fallback))


def read_rom(path: Optional[str]) -> bytes:
    if path is None:
        logger.debug("Reading ROM from stdin")
        # text-only streams (redirected or embedded) carry no .buffer
        stream = getattr(sys.stdin, "buffer", None)
        try:
            if stream is None:
                return sys.stdin.read().encode("latin-1")
            return stream.read()
        except (OSError, UnicodeEncodeError) as e:
            raise InputUnreadableError(str(e)) from e

    logger.debug("Reading ROM from %s", path)
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputNotFoundError(f"{path}: {e.strerror or e}") from e
    except OSError as e:
        raise InputUnreadableError(f"{path}: {e.strerror or e}") from e


def write_listing(text: str, path: Optional[str]) -> None:
    data = text.encode("ascii")
    if path is None:
        stream = getattr(sys.stdout, "buffer", None)
        try:
            if stream is None:
                sys.stdout.write(text)
                sys.stdout.flush()
            else:
                stream.write(data)
                stream.flush()
        except OSError as e:
            raise OutputUnwritableError(str(e)) from e
        return

    logger.debug("Writing listing to %s", path)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputUnwritableError(f"{path}: {e.strerror or e}") from e


def run(config: DisasmConfig) -> None:
    rom = read_rom(config.input_file)
    listing = frame_and_decode(rom, config.fallback)
    write_listing(listing, config.output_file)
    logger.info(
        "Disassembled %d instructions from %s",
        len(rom) // 2,
        config.input_file or "<stdin>",
    )


__all__ = [
    "disassemble_words",
    "frame_and_decode",
    "read_rom",
    "write_listing",
    "run",
]
