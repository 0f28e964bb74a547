from __future__ import annotations

from typing import Any

from wei_amounts.core.errors import InvalidMagnitude, UnrecognizedUnitWord
from wei_amounts.core.raw import RawInput, TextInput, normalize_input, raw_input_from
from wei_amounts.core.units import MAX_WEI, is_unit_token, resolve_unit, scale_to_wei


def _unrecognized_unit_word(raw: RawInput) -> str | None:
    if not isinstance(raw, TextInput):
        return None
    words = raw.text.split()
    if len(words) < 2:
        return None
    last = words[-1]
    if last.isascii() and last.isalpha() and not is_unit_token(last):
        return last
    return None


def parse_amount(value: Any) -> int:
    """Parse a decoded amount (text, or an unsigned integer) into wei.

    Accepts ``"1.5 gwei"``, ``"2ether"``, ``"1_000_000"``, ``12345`` and so on.
    """
    raw = raw_input_from(value)
    numeric_text, token = normalize_input(raw)
    unit = resolve_unit(token)
    try:
        return scale_to_wei(numeric_text, unit)
    except InvalidMagnitude as exc:
        word = _unrecognized_unit_word(raw)
        if word is None:
            raise
        raise UnrecognizedUnitWord(raw.text.strip(), word) from exc


def format_amount(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_WEI:
        raise InvalidMagnitude(str(value), "wei", "not a 256-bit unsigned integer")
    return str(value)


def deserialize(value: Any) -> int:
    """Field decoder: any accepted raw shape to a wei integer."""
    return parse_amount(value)


def serialize(value: int) -> str:
    """Field encoder: wei integer to its canonical decimal string."""
    return format_amount(value)
