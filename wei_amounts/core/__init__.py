from wei_amounts.core.codec import deserialize, format_amount, parse_amount, serialize
from wei_amounts.core.errors import (
    InvalidMagnitude,
    MalformedInput,
    UnknownUnit,
    UnrecognizedUnitWord,
    WeiAmountError,
)
from wei_amounts.core.fields import WeiAmount
from wei_amounts.core.raw import (
    RawInput,
    TextInput,
    U64Input,
    U128Input,
    normalize_input,
    raw_input_from,
)
from wei_amounts.core.units import (
    MAX_WEI,
    Unit,
    from_wei,
    resolve_unit,
    scale_to_wei,
    to_wei,
)

__all__ = [
    "MAX_WEI",
    "InvalidMagnitude",
    "MalformedInput",
    "RawInput",
    "TextInput",
    "U64Input",
    "U128Input",
    "Unit",
    "UnknownUnit",
    "UnrecognizedUnitWord",
    "WeiAmount",
    "WeiAmountError",
    "deserialize",
    "format_amount",
    "from_wei",
    "normalize_input",
    "parse_amount",
    "raw_input_from",
    "resolve_unit",
    "scale_to_wei",
    "serialize",
    "to_wei",
]
