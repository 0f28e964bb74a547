__version__ = "0.1.0"

from wei_amounts.core import (
    InvalidMagnitude,
    MalformedInput,
    Unit,
    UnknownUnit,
    WeiAmount,
    WeiAmountError,
    format_amount,
    parse_amount,
)

__all__ = [
    "__version__",
    "InvalidMagnitude",
    "MalformedInput",
    "Unit",
    "UnknownUnit",
    "WeiAmount",
    "WeiAmountError",
    "format_amount",
    "parse_amount",
]
