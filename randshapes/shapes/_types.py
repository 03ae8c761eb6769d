"""Shared dataclasses for the shapes package (avoids circular imports)."""

from dataclasses import dataclass
from typing import ClassVar, Union

from randshapes.config import DIM_MIN, DIM_MAX


def clamp(value: int) -> int:
    """Pull a raw dimension into [DIM_MIN, DIM_MAX]."""
    return max(DIM_MIN, min(int(value), DIM_MAX))


class UnexpectedChoiceError(RuntimeError):
    """The factory drew a kind index outside the registry."""

    def __init__(self, choice):
        super().__init__(f"Unexpected value: {choice}")
        self.choice = choice


# Frozen dataclasses: __post_init__ clamps through object.__setattr__.

@dataclass(frozen=True)
class Oval:
    id: int
    horizontal_radius: int
    vertical_radius: int
    kind: ClassVar[str] = "OVAL"

    def __post_init__(self):
        object.__setattr__(self, "horizontal_radius", clamp(self.horizontal_radius))
        object.__setattr__(self, "vertical_radius", clamp(self.vertical_radius))


@dataclass(frozen=True)
class Circle:
    id: int
    radius: int
    kind: ClassVar[str] = "CIRCLE"

    def __post_init__(self):
        object.__setattr__(self, "radius", clamp(self.radius))

    @property
    def horizontal_radius(self) -> int:
        return self.radius

    @property
    def vertical_radius(self) -> int:
        return self.radius


@dataclass(frozen=True)
class Rectangle:
    id: int
    length: int
    width: int
    kind: ClassVar[str] = "RECTANGLE"

    def __post_init__(self):
        object.__setattr__(self, "length", clamp(self.length))
        object.__setattr__(self, "width", clamp(self.width))


@dataclass(frozen=True)
class Square:
    id: int
    side: int
    kind: ClassVar[str] = "SQUARE"

    def __post_init__(self):
        object.__setattr__(self, "side", clamp(self.side))

    @property
    def length(self) -> int:
        return self.side

    @property
    def width(self) -> int:
        return self.side


Shape = Union[Oval, Circle, Rectangle, Square]
