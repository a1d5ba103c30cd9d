"""Trait drills: appending "Bar", shared licensing info and combined traits."""

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both items carry the same licensing information."""
    for item in (software, software_two):
        if not isinstance(item, Licensed):
            raise TypeError(f"{type(item).__name__} is not Licensed")
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """A behaviour with a default answer."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Another behaviour with a default answer."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """A type with both behaviours."""


class OtherStruct(SomeTrait, OtherTrait):
    """Another type with both behaviours."""


def some_func(item) -> bool:
    """Combine both behaviours of an item that has them."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError(f"{type(item).__name__} lacks SomeTrait or OtherTrait")
    return item.some_function() and item.other_function()