"""
Shape generation package for randshapes.

Each generator takes a numpy ``Generator`` and an id iterator and returns one
frozen shape value with its dimensions already clamped into [1, 100].  Ids
are drawn from the iterator the caller owns, so every generated shape burns
exactly one id whether or not it is kept.

Usage::

    import itertools
    import numpy as np
    from randshapes.shapes import random_shape, shape_dimensions

    rng = np.random.default_rng(0)
    ids = itertools.count(1)
    shape = random_shape(rng, ids)
    print(shape.kind, shape_dimensions(shape))
"""

import numpy as np

from randshapes.config import NUM_KINDS
from randshapes.shapes._types import (  # noqa: F401
    Circle, Oval, Rectangle, Shape, Square, UnexpectedChoiceError, clamp,
)
from randshapes.shapes.primitives import (  # noqa: F401
    PRIMITIVE_GENERATORS, shape_dimensions, shape_id, shape_type,
)


def random_shape(rng: np.random.Generator, ids) -> Shape:
    """Pick a uniformly random kind and produce a shape of it."""
    choice = int(rng.integers(NUM_KINDS))
    if not 0 <= choice < len(PRIMITIVE_GENERATORS):
        raise UnexpectedChoiceError(choice)
    return PRIMITIVE_GENERATORS[choice](rng, ids)
