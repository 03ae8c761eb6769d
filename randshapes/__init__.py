"""randshapes - a canvas of unique, randomly sized shapes."""

from randshapes.config import KINDS, KIND_MAP, NUM_KINDS, DIM_MIN, DIM_MAX, CANVAS_SHAPES
from randshapes.canvas import Canvas
