from __future__ import annotations

import re
from enum import StrEnum
from typing import Final

from eth_utils.currency import MAX_WEI

from wei_amounts.core.errors import InvalidMagnitude, UnknownUnit


class Unit(StrEnum):
    WEI = "wei"
    GWEI = "gwei"
    ETHER = "ether"

    @property
    def exponent(self) -> int:
        return UNIT_EXPONENTS[self]


# Lowercase spelling -> unit. Lookups are case-insensitive.
UNIT_ALIASES: Final[dict[str, Unit]] = {
    "ether": Unit.ETHER,
    "eth": Unit.ETHER,
    "gwei": Unit.GWEI,
    "wei": Unit.WEI,
}

UNIT_EXPONENTS: Final[dict[Unit, int]] = {
    Unit.WEI: 0,
    Unit.GWEI: 9,
    Unit.ETHER: 18,
}

_MAX_WEI_DIGITS: Final[int] = len(str(MAX_WEI))
_DECIMAL_RE = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?")


def is_unit_token(token: str) -> bool:
    return token.lower() in UNIT_ALIASES


def resolve_unit(token: str) -> Unit:
    unit = UNIT_ALIASES.get(str(token).lower())
    if unit is None:
        raise UnknownUnit(token)
    return unit


def scale_to_wei(numeric_text: str, unit: Unit) -> int:
    """Convert a decimal amount expressed in ``unit`` into an exact wei integer.

    Underscores are grouping noise and are dropped. The decimal point is
    shifted on the digit string, so no value is ever rounded: fractional
    digits that would leave a partial wei are rejected, as is anything
    above 2**256 - 1.
    """
    cleaned = numeric_text.replace("_", "")
    match = _DECIMAL_RE.fullmatch(cleaned)
    if match is None or not (match["whole"] or match["frac"]):
        raise InvalidMagnitude(cleaned, unit.value, "not a non-negative decimal number")

    exponent = unit.exponent
    # Exactness is the test, not digit count: trailing zeros never leave a partial wei.
    frac = (match["frac"] or "").rstrip("0")
    if len(frac) > exponent:
        raise InvalidMagnitude(
            cleaned,
            unit.value,
            f"{len(frac)} fractional digits exceed the {exponent} allowed for {unit.value}",
        )

    digits = (match["whole"] + frac.ljust(exponent, "0")).lstrip("0")
    # int() refuses very long digit strings, so bound the length first.
    if len(digits) > _MAX_WEI_DIGITS or (digits and int(digits) > MAX_WEI):
        raise InvalidMagnitude(cleaned, unit.value, "overflows 256 bits")
    return int(digits) if digits else 0


def to_wei(amount: str | int, unit: str | Unit = Unit.WEI) -> int:
    return scale_to_wei(str(amount), resolve_unit(unit))


def from_wei(value: int, unit: str | Unit = Unit.WEI) -> str:
    """Render a wei magnitude as an exact decimal string in ``unit``."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_WEI:
        raise InvalidMagnitude(str(value), "wei", "not a 256-bit unsigned integer")
    exponent = resolve_unit(unit).exponent
    if exponent == 0:
        return str(value)
    digits = str(value).rjust(exponent + 1, "0")
    whole, frac = digits[:-exponent], digits[-exponent:].rstrip("0")
    return f"{whole}.{frac}" if frac else whole
