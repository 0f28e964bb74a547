from __future__ import annotations

from typing import Any


class WeiAmountError(ValueError):
    """Base class for every amount parsing failure."""


class MalformedInput(WeiAmountError):
    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        if value is None:
            super().__init__(message)
        else:
            super().__init__(f"{message}: {value!r}")


class UnknownUnit(WeiAmountError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unknown unit: {token}")


class InvalidMagnitude(WeiAmountError):
    def __init__(self, value: str, unit: str, reason: str) -> None:
        self.value = value
        self.unit = unit
        self.reason = reason
        super().__init__(f"invalid value `{value} {unit}`: {reason}")


class UnrecognizedUnitWord(InvalidMagnitude, UnknownUnit):
    """Whitespace-separated trailing word that is neither a unit nor a number.

    Such text is first retried as a plain base-unit number; once that fails
    the error is both an invalid magnitude and an unknown unit.
    """

    def __init__(self, value: str, token: str) -> None:
        self.value = value
        self.unit = "wei"
        self.token = token
        self.reason = f"not a decimal number and `{token}` is not a known unit"
        ValueError.__init__(self, f"invalid value `{value}`: {self.reason}")
