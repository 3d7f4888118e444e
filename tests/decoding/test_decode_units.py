import pytest

from ch8disasm import decode_map
from ch8disasm.decode_map import FallbackStyle, decode, decode_instruction


@pytest.mark.parametrize(
    "word, text",
    [
        (0x00E0, "CLS"),
        (0x00EE, "RET"),
        (0x0123, "SYS 0x123"),
        (0x0FFF, "SYS 0xFFF"),
        (0x1234, "JP 0x234"),
        (0x1000, "JP 0x000"),
        (0x2ABC, "CALL 0xABC"),
        (0xA22A, "LD I, 0x22A"),
        (0xB300, "JP V0, 0x300"),
        (0x3A0F, "SE VA, 0x0F"),
        (0x4B01, "SNE VB, 0x01"),
        (0x6A07, "LD VA, 0x07"),
        (0x7FFF, "ADD VF, 0xFF"),
        (0xC10A, "RND V1, 0x0A"),
        (0x5120, "SE V1, V2"),
        (0x8340, "LD V3, V4"),
        (0x8341, "OR V3, V4"),
        (0x8342, "AND V3, V4"),
        (0x8343, "XOR V3, V4"),
        (0x8344, "ADD V3, V4"),
        (0x8345, "SUB V3, V4"),
        (0x8347, "SUBN V3, V4"),
        (0x9EF0, "SNE VE, VF"),
        (0x8016, "SHR V0"),
        (0x8CDE, "SHL VC"),
        (0xDAB4, "DRW VA, VB, 0x4"),
        (0xD01F, "DRW V0, V1, 0xF"),
        (0xE29E, "SKP V2"),
        (0xE3A1, "SKNP V3"),
        (0xF407, "LD V4, DT"),
        (0xF50A, "LD V5, K"),
        (0xF615, "LD DT, V6"),
        (0xF718, "LD ST, V7"),
        (0xF81E, "ADD I, V8"),
        (0xF929, "LD F, V9"),
        (0xFA33, "LD B, VA"),
        (0xFB55, "LD [I], VB"),
        (0xFF65, "LD VF, [I]"),
    ],
)
def test_decode_known_forms(word: int, text: str) -> None:
    assert decode(word) == text


def test_exact_words_win_over_sys() -> None:
    assert decode_instruction(0x00E0).pattern.name == "CLS"
    assert decode_instruction(0x00EE).pattern.name == "RET"
    assert decode_instruction(0x00E1).pattern.name == "SYS addr"


def test_shift_ignores_second_register() -> None:
    for vy in range(16):
        assert decode(0x8506 | (vy << 4)) == "SHR V5"
        assert decode(0x850E | (vy << 4)) == "SHL V5"


@pytest.mark.parametrize(
    "word",
    [
        0x5121,  # 5xy with non-zero selector
        0x9AB1,
        0x8008,  # 8xy selectors 8-D and F are undefined
        0x800F,
        0xE000,  # Ex with unknown low byte
        0xE19F,
        0xF000,
        0xFF66,
    ],
)
def test_unknown_words_use_fallback(word: int) -> None:
    decoded = decode_instruction(word)
    assert not decoded.known
    assert decoded.mnemonic is None


# Two fallback spellings exist for data words: "ERR: XXXX" (the default) and
# "0xXXXX". Both are pinned here so a change to either is deliberate.
def test_fallback_err_rendering_is_default() -> None:
    assert decode_map.DEFAULT_FALLBACK is FallbackStyle.ERR
    assert decode(0xE000) == "ERR: E000"
    assert decode(0x800F) == "ERR: 800F"
    assert decode(0xF0AB) == "ERR: F0AB"


def test_fallback_hex_rendering() -> None:
    assert decode(0xE000, FallbackStyle.HEX) == "0xE000"
    assert decode(0x5001, FallbackStyle.HEX) == "0x5001"
    assert decode(0xFF66, FallbackStyle.HEX) == "0xFF66"


def test_fallback_style_does_not_affect_known_words() -> None:
    assert decode(0x1234, FallbackStyle.HEX) == decode(0x1234) == "JP 0x234"


def test_decoded_instr_exposes_tokens() -> None:
    di = decode_instruction(0xDAB4)
    assert di.known
    assert di.mnemonic == "DRW"
    assert di.word == 0xDAB4
    assert di.text() == "DRW VA, VB, 0x4"


def test_decode_rejects_words_wider_than_16_bits() -> None:
    with pytest.raises(ValueError):
        decode(0x10000)
    with pytest.raises(ValueError):
        decode(-1)
