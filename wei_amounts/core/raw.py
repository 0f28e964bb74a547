from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Final

from wei_amounts.core.errors import MalformedInput
from wei_amounts.core.units import Unit, is_unit_token

U64_MAX: Final[int] = 2**64 - 1
U128_MAX: Final[int] = 2**128 - 1

_TRAILING_LETTERS_RE = re.compile(r"[A-Za-z]+\Z")


@dataclass(frozen=True)
class TextInput:
    text: str


@dataclass(frozen=True)
class U64Input:
    value: int


@dataclass(frozen=True)
class U128Input:
    value: int


RawInput = TextInput | U64Input | U128Input


def raw_input_from(value: Any) -> RawInput:
    """Tag a decoded primitive as one of the three accepted shapes."""
    if isinstance(value, (TextInput, U64Input, U128Input)):
        return value
    if isinstance(value, str):
        return TextInput(value)
    # bool is an int subclass but never an amount
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= U64_MAX:
            return U64Input(value)
        if U64_MAX < value <= U128_MAX:
            return U128Input(value)
        raise MalformedInput("integer is not a 128-bit unsigned value", value)
    raise MalformedInput(f"unsupported value type {type(value).__name__}", value)


def normalize_input(raw: RawInput) -> tuple[str, str]:
    """Split a raw amount into ``(numeric_text, unit_token)``.

    Bare integers are always wei. For text, a whitespace-separated unit wins
    when the last word is a known spelling; otherwise the whole text is kept
    as a wei number. Without whitespace a trailing run of ASCII letters is
    taken as the unit (``"10gwei"``), and no letters means wei.
    """
    if isinstance(raw, (U64Input, U128Input)):
        return str(raw.value), Unit.WEI.value

    text = raw.text.strip()
    if not text:
        raise MalformedInput("empty value")

    parts = text.rsplit(None, 1)
    if len(parts) == 2:
        lhs, rhs = parts
        if is_unit_token(rhs):
            return lhs, rhs
        return text, Unit.WEI.value

    match = _TRAILING_LETTERS_RE.search(text)
    if match is None:
        return text, Unit.WEI.value
    if match.start() == 0:
        raise MalformedInput("missing number before unit", text)
    return text[: match.start()], match.group()
