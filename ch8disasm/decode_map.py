from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .tokens import (
    COMMA,
    SPACE,
    TAddr,
    TByte,
    TInstr,
    TNibble,
    TReg,
    TSep,
    TText,
    Token,
    asm_str,
)


class FallbackStyle(str, Enum):
    """How a word that matches no instruction form is rendered."""

    ERR = "err"  # ERR: 1F2E
    HEX = "hex"  # 0x1F2E

    def render(self, word: int) -> str:
        if self is FallbackStyle.HEX:
            return f"0x{word:04X}"
        return f"ERR: {word:04X}"


DEFAULT_FALLBACK = FallbackStyle.ERR


@dataclass(frozen=True, slots=True)
class Fields:
    """The bit fields every instruction form is decoded from."""

    opcode_hi: int  # bits 15-12
    addr12: int  # bits 11-0
    vx: int  # bits 11-8
    byte8: int  # bits 7-0
    vy: int  # bits 7-4
    nibble4: int  # bits 3-0

    @classmethod
    def from_word(cls, word: int) -> "Fields":
        if not 0 <= word <= 0xFFFF:
            raise ValueError(f"Instruction word out of range: {word:#x}")
        return cls(
            opcode_hi=(word >> 12) & 0xF,
            addr12=word & 0x0FFF,
            vx=(word >> 8) & 0xF,
            byte8=word & 0x00FF,
            vy=(word >> 4) & 0xF,
            nibble4=word & 0x000F,
        )


Renderer = Callable[[Fields], List[Token]]


@dataclass(frozen=True, slots=True)
class Pattern:
    mask: int
    match: int
    name: str
    render: Renderer

    def matches(self, word: int) -> bool:
        return word & self.mask == self.match


@dataclass(frozen=True, slots=True)
class DecodedInstr:
    word: int
    tokens: Tuple[Token, ...]
    pattern: Optional[Pattern] = None

    @property
    def known(self) -> bool:
        return self.pattern is not None

    @property
    def mnemonic(self) -> Optional[str]:
        if not self.tokens:
            return None
        return str(self.tokens[0])

    def text(self, fallback: FallbackStyle = DEFAULT_FALLBACK) -> str:
        if self.pattern is None:
            return fallback.render(self.word)
        return asm_str(list(self.tokens))


def _bare(mnemonic: str) -> Renderer:
    def render(f: Fields) -> List[Token]:
        return [TInstr(mnemonic)]

    return render


def _addr(mnemonic: str, *prefix: str) -> Renderer:
    # JP V0, addr carries a fixed register operand before the address
    def render(f: Fields) -> List[Token]:
        tokens: List[Token] = [TInstr(mnemonic), TSep(SPACE)]
        for text in prefix:
            tokens += [TText(text), TSep(COMMA)]
        tokens.append(TAddr(f.addr12))
        return tokens

    return render


def _reg_byte(mnemonic: str) -> Renderer:
    def render(f: Fields) -> List[Token]:
        return [
            TInstr(mnemonic),
            TSep(SPACE),
            TReg(f.vx),
            TSep(COMMA),
            TByte(f.byte8),
        ]

    return render


def _reg_reg(mnemonic: str) -> Renderer:
    def render(f: Fields) -> List[Token]:
        return [
            TInstr(mnemonic),
            TSep(SPACE),
            TReg(f.vx),
            TSep(COMMA),
            TReg(f.vy),
        ]

    return render


def _reg(mnemonic: str) -> Renderer:
    # SHR/SHL/SKP/SKNP: Vy (when present) is ignored
    def render(f: Fields) -> List[Token]:
        return [TInstr(mnemonic), TSep(SPACE), TReg(f.vx)]

    return render


def _drw(f: Fields) -> List[Token]:
    return [
        TInstr("DRW"),
        TSep(SPACE),
        TReg(f.vx),
        TSep(COMMA),
        TReg(f.vy),
        TSep(COMMA),
        TNibble(f.nibble4),
    ]


def _load_from(mnemonic: str, source: str) -> Renderer:
    """``MNEM Vx, source``"""

    def render(f: Fields) -> List[Token]:
        return [
            TInstr(mnemonic),
            TSep(SPACE),
            TReg(f.vx),
            TSep(COMMA),
            TText(source),
        ]

    return render


def _store_to(mnemonic: str, dest: str) -> Renderer:
    """``MNEM dest, Vx``"""

    def render(f: Fields) -> List[Token]:
        return [
            TInstr(mnemonic),
            TSep(SPACE),
            TText(dest),
            TSep(COMMA),
            TReg(f.vx),
        ]

    return render


# First match wins. The forms are mutually exclusive, but the order is kept
# stable so a lookup reports the same entry every time.
PATTERNS: Tuple[Pattern, ...] = (
    # exact words
    Pattern(0xFFFF, 0x00E0, "CLS", _bare("CLS")),
    Pattern(0xFFFF, 0x00EE, "RET", _bare("RET")),
    # nnn
    Pattern(0xF000, 0x0000, "SYS addr", _addr("SYS")),
    Pattern(0xF000, 0x1000, "JP addr", _addr("JP")),
    Pattern(0xF000, 0x2000, "CALL addr", _addr("CALL")),
    Pattern(0xF000, 0xA000, "LD I, addr", _addr("LD", "I")),
    Pattern(0xF000, 0xB000, "JP V0, addr", _addr("JP", "V0")),
    # xkk
    Pattern(0xF000, 0x3000, "SE Vx, byte", _reg_byte("SE")),
    Pattern(0xF000, 0x4000, "SNE Vx, byte", _reg_byte("SNE")),
    Pattern(0xF000, 0x6000, "LD Vx, byte", _reg_byte("LD")),
    Pattern(0xF000, 0x7000, "ADD Vx, byte", _reg_byte("ADD")),
    Pattern(0xF000, 0xC000, "RND Vx, byte", _reg_byte("RND")),
    # xy with a selector in the low nibble
    Pattern(0xF00F, 0x5000, "SE Vx, Vy", _reg_reg("SE")),
    Pattern(0xF00F, 0x8000, "LD Vx, Vy", _reg_reg("LD")),
    Pattern(0xF00F, 0x8001, "OR Vx, Vy", _reg_reg("OR")),
    Pattern(0xF00F, 0x8002, "AND Vx, Vy", _reg_reg("AND")),
    Pattern(0xF00F, 0x8003, "XOR Vx, Vy", _reg_reg("XOR")),
    Pattern(0xF00F, 0x8004, "ADD Vx, Vy", _reg_reg("ADD")),
    Pattern(0xF00F, 0x8005, "SUB Vx, Vy", _reg_reg("SUB")),
    Pattern(0xF00F, 0x8007, "SUBN Vx, Vy", _reg_reg("SUBN")),
    Pattern(0xF00F, 0x9000, "SNE Vx, Vy", _reg_reg("SNE")),
    Pattern(0xF00F, 0x8006, "SHR Vx", _reg("SHR")),
    Pattern(0xF00F, 0x800E, "SHL Vx", _reg("SHL")),
    # xyn
    Pattern(0xF000, 0xD000, "DRW Vx, Vy, nibble", _drw),
    # x with a selector in the low byte
    Pattern(0xF0FF, 0xE09E, "SKP Vx", _reg("SKP")),
    Pattern(0xF0FF, 0xE0A1, "SKNP Vx", _reg("SKNP")),
    Pattern(0xF0FF, 0xF007, "LD Vx, DT", _load_from("LD", "DT")),
    Pattern(0xF0FF, 0xF00A, "LD Vx, K", _load_from("LD", "K")),
    Pattern(0xF0FF, 0xF015, "LD DT, Vx", _store_to("LD", "DT")),
    Pattern(0xF0FF, 0xF018, "LD ST, Vx", _store_to("LD", "ST")),
    Pattern(0xF0FF, 0xF01E, "ADD I, Vx", _store_to("ADD", "I")),
    Pattern(0xF0FF, 0xF029, "LD F, Vx", _store_to("LD", "F")),
    Pattern(0xF0FF, 0xF033, "LD B, Vx", _store_to("LD", "B")),
    Pattern(0xF0FF, 0xF055, "LD [I], Vx", _store_to("LD", "[I]")),
    Pattern(0xF0FF, 0xF065, "LD Vx, [I]", _load_from("LD", "[I]")),
)


def find_pattern(word: int) -> Optional[Pattern]:
    for pattern in PATTERNS:
        if pattern.matches(word):
            return pattern
    return None


def decode_instruction(word: int) -> DecodedInstr:
    fields = Fields.from_word(word)
    pattern = find_pattern(word)
    if pattern is None:
        return DecodedInstr(word=word, tokens=())
    return DecodedInstr(
        word=word, tokens=tuple(pattern.render(fields)), pattern=pattern
    )


def decode(word: int, fallback: FallbackStyle = DEFAULT_FALLBACK) -> str:
    """Render one instruction word as a mnemonic line (without terminator)."""
    return decode_instruction(word).text(fallback)


__all__ = [
    "FallbackStyle",
    "DEFAULT_FALLBACK",
    "Fields",
    "Pattern",
    "DecodedInstr",
    "PATTERNS",
    "find_pattern",
    "decode_instruction",
    "decode",
]
