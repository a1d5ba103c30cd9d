"""Quiz drills: apple pricing, a string transformer and report cards."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

APPLE_COST = 2
APPLE_COST_WITH_DISCOUNT = 1
DISCOUNT_THRESHOLD = 40


def calculate_price_of_apples(number_apples: int) -> int:
    """Price of an order: 2 per apple, or 1 per apple above 40 apples."""
    if number_apples > DISCOUNT_THRESHOLD:
        return number_apples * APPLE_COST_WITH_DISCOUNT
    return number_apples * APPLE_COST


@dataclass(frozen=True)
class Uppercase:
    """Command: uppercase the string."""


@dataclass(frozen=True)
class Trim:
    """Command: strip whitespace from both ends."""


@dataclass(frozen=True)
class Append:
    """Command: append "bar" a given number of times."""

    times: int

    def __post_init__(self):
        if self.times < 0:
            raise ValueError("times must not be negative")


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetic."""

    grade: Any
    student_name: str
    student_age: int

    def __post_init__(self):
        if not 0 <= self.student_age <= 255:
            raise ValueError("student_age must be between 0 and 255")

    def report(self) -> str:
        """Return the printable line of the report card."""
        return (f"{self.student_name} ({self.student_age}) - "
                f"achieved a grade of {_display(self.grade)}")