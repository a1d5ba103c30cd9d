"""Enum drills: messages that change a small state machine."""

from dataclasses import dataclass, field

_U8_MAX = 255


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be between 0 and {_U8_MAX}")


@dataclass(frozen=True)
class Point:
    """A position with small unsigned coordinates."""

    x: int
    y: int

    def __post_init__(self):
        _check_u8("x", self.x)
        _check_u8("y", self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Message: set the colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            _check_u8(name, getattr(self, name))


@dataclass(frozen=True)
class Echo:
    """Message: print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Message: stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """The state that messages act on."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")