# based on https://github.com/whitequark/binja-avnera/blob/main/mc/tokens.py
from typing import List


class Token:
    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return False
        return self.__dict__ == getattr(other, "__dict__", {})


def asm_str(parts: List[Token]) -> str:
    return "".join(str(part) for part in parts)


class TInstr(Token):
    def __init__(self, instr: str) -> None:
        self.instr = instr

    def __repr__(self) -> str:
        return f"TInstr({self.instr})"

    def __str__(self) -> str:
        return self.instr


class TSep(Token):
    def __init__(self, sep: str) -> None:
        self.sep = sep

    def __repr__(self) -> str:
        return f"TSep({self.sep!r})"

    def __str__(self) -> str:
        return self.sep


class TText(Token):
    """Fixed operand text such as ``I``, ``DT``, ``K`` or ``[I]``."""

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"TText({self.text})"

    def __str__(self) -> str:
        return self.text


class TReg(Token):
    def __init__(self, index: int) -> None:
        if not 0 <= index <= 0xF:
            raise ValueError(f"Register index out of range: {index:#x}")
        self.index = index

    def __repr__(self) -> str:
        return f"TReg(V{self.index:X})"

    def __str__(self) -> str:
        return f"V{self.index:X}"


class TImm(Token):
    """Immediate literal, zero-padded to ``digits`` hex digits."""

    def __init__(self, value: int, digits: int) -> None:
        if not 0 <= value < (1 << (4 * digits)):
            raise ValueError(f"Immediate {value:#x} does not fit {digits} digits")
        self.value = value
        self.digits = digits

    def __repr__(self) -> str:
        return f"TImm({self.value:#x}, {self.digits})"

    def __str__(self) -> str:
        return f"0x{self.value:0{self.digits}X}"


class TAddr(TImm):
    def __init__(self, value: int) -> None:
        super().__init__(value, 3)

    def __repr__(self) -> str:
        return f"TAddr({self.value:#05x})"


class TByte(TImm):
    def __init__(self, value: int) -> None:
        super().__init__(value, 2)


class TNibble(TImm):
    def __init__(self, value: int) -> None:
        super().__init__(value, 1)


COMMA = ", "
SPACE = " "
