import pytest

from .tokens import TAddr, TByte, TImm, TInstr, TNibble, TReg, TSep, TText, asm_str


def test_numeric_tokens_pad_to_field_width() -> None:
    assert str(TAddr(0x2A)) == "0x02A"
    assert str(TByte(0x7)) == "0x07"
    assert str(TNibble(0xF)) == "0xF"
    assert str(TImm(0xABC, 3)) == "0xABC"


def test_register_token_has_no_hex_prefix() -> None:
    assert str(TReg(0xA)) == "VA"
    assert str(TReg(0)) == "V0"


def test_tokens_reject_out_of_range_values() -> None:
    with pytest.raises(ValueError):
        TReg(0x10)
    with pytest.raises(ValueError):
        TByte(0x100)
    with pytest.raises(ValueError):
        TAddr(0x1000)


def test_asm_str_joins_tokens() -> None:
    parts = [TInstr("LD"), TSep(" "), TText("[I]"), TSep(", "), TReg(3)]
    assert asm_str(parts) == "LD [I], V3"


def test_token_equality() -> None:
    assert TReg(1) == TReg(1)
    assert TReg(1) != TReg(2)
    assert TAddr(5) != TImm(5, 3)
