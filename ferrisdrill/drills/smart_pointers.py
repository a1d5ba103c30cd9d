"""Smart-pointer drills: a cons list and clone-on-write data."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list (None is the empty list)."""

    head: int
    tail: Optional["Cons"] = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A cons list holding a few values."""
    return Cons(1, Cons(2, Cons(3)))


class Cow:
    """Data that is either borrowed (shared, read-only) or owned.

    Borrowed data is copied the first time it is changed.
    """

    def __init__(self, data: Sequence[int], owned: bool):
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> "Cow":
        """Wrap *data* without copying it."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[int]) -> "Cow":
        """Take ownership of the list *data*."""
        return cls(data, owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cow):
            return NotImplemented
        return list(self._data) == list(other._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only when needed."""
    for index, value in enumerate(cow):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow