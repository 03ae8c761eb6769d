"""Tests for the canvas container."""

import pytest

from randshapes.canvas import Canvas
from randshapes.shapes import Circle, Oval, Square


@pytest.fixture
def canvas():
    return Canvas()


class TestCanvas:
    def test_starts_empty(self, canvas):
        assert len(canvas) == 0
        assert canvas.get_shapes() == []

    def test_insertion_order(self, canvas):
        shapes = [Square(3, 4), Oval(1, 2, 3), Circle(2, 9)]
        for s in shapes:
            canvas.add_shape(s)
        assert canvas.get_shapes() == shapes
        assert list(canvas) == shapes

    def test_accepts_duplicates(self, canvas):
        canvas.add_shape(Circle(1, 5))
        canvas.add_shape(Circle(2, 5))
        assert len(canvas) == 2

    def test_get_shapes_is_live(self, canvas):
        view = canvas.get_shapes()
        canvas.add_shape(Circle(1, 5))
        assert len(view) == 1
