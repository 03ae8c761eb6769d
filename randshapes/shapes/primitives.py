"""
Primitive shape generators and label/format dispatch: ovals, circles,
rectangles, squares.
"""

import numpy as np

from randshapes.config import DIM_MIN, DIM_MAX, KIND_MAP
from randshapes.shapes._types import Circle, Oval, Rectangle, Shape, Square


def _rand_dim(rng: np.random.Generator) -> int:
    return int(rng.integers(DIM_MIN, DIM_MAX + 1))


# ---------------------------------------------------------------------------
# Label / format dispatch
# ---------------------------------------------------------------------------

def shape_id(shape: Shape) -> int:
    return shape.id


def shape_type(shape: Shape) -> str:
    """Fixed type label, one of ``config.KINDS``."""
    return shape.kind


def shape_dimensions(shape: Shape) -> str:
    """Dimension string: ``"AxB"`` for two-sided shapes, ``"N"`` for circles.

    Squares share the rectangle format and print both sides (``"5x5"``);
    only circles collapse to a single number.
    """
    if isinstance(shape, Circle):
        return str(shape.radius)
    if isinstance(shape, Oval):
        return f"{shape.horizontal_radius}x{shape.vertical_radius}"
    if isinstance(shape, (Rectangle, Square)):
        return f"{shape.length}x{shape.width}"
    raise TypeError(f"Not a shape: {shape!r}")


# ---------------------------------------------------------------------------
# Oval (independent radii)
# ---------------------------------------------------------------------------

def gen_oval(rng, ids) -> Oval:
    return Oval(next(ids), _rand_dim(rng), _rand_dim(rng))


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

def gen_circle(rng, ids) -> Circle:
    return Circle(next(ids), _rand_dim(rng))


# ---------------------------------------------------------------------------
# Rectangle (independent sides)
# ---------------------------------------------------------------------------

def gen_rectangle(rng, ids) -> Rectangle:
    return Rectangle(next(ids), _rand_dim(rng), _rand_dim(rng))


# ---------------------------------------------------------------------------
# Square
# ---------------------------------------------------------------------------

def gen_square(rng, ids) -> Square:
    return Square(next(ids), _rand_dim(rng))


GENERATORS_BY_KIND = {
    Oval.kind: gen_oval,
    Circle.kind: gen_circle,
    Rectangle.kind: gen_rectangle,
    Square.kind: gen_square,
}

# Indexed by the factory draw; KeyError at import if a tag is not registered
PRIMITIVE_GENERATORS = [
    gen for _, gen in sorted((KIND_MAP[kind], gen) for kind, gen in GENERATORS_BY_KIND.items())
]
