"""Struct drills: colours, orders built from a template, and packages."""

from dataclasses import dataclass
from typing import NamedTuple


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255")


@dataclass(frozen=True)
class ColorClassic:
    """A colour with named components."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            _check_u8(name, getattr(self, name))


class ColorTuple(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLike:
    """A type that holds no data."""

    def __repr__(self) -> str:
        return "UnitLike"

    def __eq__(self, other):
        return isinstance(other, UnitLike)

    def __hash__(self):
        return hash(UnitLike)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The template order other orders are built from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self):
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """Whether sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fees for the package's weight."""
        return cents_per_gram * self.weight_in_grams