"""Error-handling drills: name tags, token costs and positive integers."""

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32_BITS = 32
_I64_BITS = 64

PROCESSING_FEE = 1
COST_PER_ITEM = 5


class ParseIntError(ValueError):
    """The text is not an integer that fits the target type."""


def _parse_signed(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    number = int(text)
    if number > 2 ** (bits - 1) - 1:
        raise ParseIntError("number too large to fit in target type")
    if number < -(2 ** (bits - 1)):
        raise ParseIntError("number too small to fit in target type")
    return number


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer, raising ParseIntError on bad input."""
    return _parse_signed(text, _I64_BITS)


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_signed(item_quantity, _I32_BITS)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(2 ** 31) <= cost <= 2 ** 31 - 1:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity and return the tokens left over."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value is not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer.

    Raises ParseIntError for text that is not an integer and
    CreationError for integers that are not positive.
    """
    return PositiveNonzeroInteger(parse_int(text))