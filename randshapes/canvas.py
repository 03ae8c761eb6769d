"""Ordered, append-only collection of shapes."""

from typing import List

from randshapes.shapes import Shape


class Canvas:
    """Holds shapes in insertion order.  No size limit, no rejection."""

    def __init__(self):
        self.shapes: List[Shape] = []

    def __len__(self):
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    def add_shape(self, shape: Shape):
        self.shapes.append(shape)

    def get_shapes(self) -> List[Shape]:
        """The live list, not a copy."""
        return self.shapes
