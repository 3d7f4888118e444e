from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from .decode_map import DEFAULT_FALLBACK, FallbackStyle


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


def _env_fallback(name: str) -> FallbackStyle:
    raw = (os.getenv(name) or "").strip().casefold()
    try:
        return FallbackStyle(raw)
    except ValueError:
        return DEFAULT_FALLBACK


@dataclass(frozen=True)
class DisasmConfig:
    input_file: Optional[str]  # None reads stdin
    output_file: Optional[str]  # None writes stdout
    fallback: FallbackStyle = DEFAULT_FALLBACK
    verbose: bool = False


def load_config(
    input_file: Optional[str] = None,
    output_file: Optional[str] = None,
    fallback: Optional[FallbackStyle] = None,
    verbose: Optional[bool] = None,
) -> DisasmConfig:
    return DisasmConfig(
        input_file=input_file or None,
        output_file=output_file or None,
        fallback=(
            fallback if fallback is not None else _env_fallback("CH8DISASM_FALLBACK")
        ),
        verbose=(
            verbose if verbose is not None else _env_flag("CH8DISASM_VERBOSE")
        ),
    )


__all__ = ["DisasmConfig", "load_config"]
