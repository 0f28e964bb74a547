from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

from wei_amounts.core.codec import format_amount, parse_amount

# Loose input on validation, canonical wei string on dump.
WeiAmount = Annotated[
    int,
    BeforeValidator(parse_amount),
    PlainSerializer(format_amount, return_type=str),
]
