"""Basic drills: conditions, functions, strings, lists, generics, options."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_COLOR_WORDS = frozenset({"green", "blue", "red"})
_LAST_FULL_HOUR = 22
_HOURS_PER_DAY = 24
_ICECREAM_BEFORE_TEN = 5


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """Return "foo" for "fizz", "bar" for "fuzz", and "baz" otherwise."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """Whether *num* is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Sale price: 10 off an even price, 3 off an odd one."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """Return the square of *num*."""
    return num * num


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether *attempt* is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of *text*."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to *text*."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" in *text* with "balloons"."""
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of *values* in place and return the list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element of *values* doubled."""
    return [value * 2 for value in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None for an invalid hour."""
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day < _LAST_FULL_HOUR:
        return _ICECREAM_BEFORE_TEN
    if time_of_day < _HOURS_PER_DAY:
        return 0
    return None


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 length; *y* when they are equal."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y