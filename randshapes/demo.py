"""
Random canvas demo.

Fill a canvas with shapes of random kind and size, skipping any shape whose
``"<TYPE> <dimensions>"`` signature is already on the canvas, then print a
numbered report.

Usage (CLI):
    python -m randshapes.demo
    python -m randshapes.demo --seed 7 --verbose

Or from a notebook:
    from randshapes.demo import fill_canvas, format_report
    canvas = fill_canvas(np.random.default_rng(7))
    print("\\n".join(format_report(canvas)))
"""

import argparse
import itertools
import logging
from typing import List

import numpy as np

from randshapes.canvas import Canvas
from randshapes.config import CANVAS_SHAPES, REPORT_HEADER
from randshapes.shapes import Shape, random_shape, shape_dimensions, shape_type

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def signature(shape: Shape) -> str:
    return shape_type(shape) + " " + shape_dimensions(shape)


def fill_canvas(rng=None, ids=None, num_shapes=CANVAS_SHAPES) -> Canvas:
    """Generate shapes until the canvas holds ``num_shapes`` unique ones.

    Parameters
    ----------
    rng : np.random.Generator or None
        Random source.  A fresh unseeded generator if None.
    ids : iterator of int or None
        Id source shared by every generated shape.  ``itertools.count(1)``
        if None.  Discarded duplicates still consume an id.
    num_shapes : int
        Number of unique shapes to collect.

    Returns
    -------
    Canvas
    """
    rng = rng if rng is not None else np.random.default_rng()
    ids = ids if ids is not None else itertools.count(1)

    canvas = Canvas()
    seen = set()
    attempts = 0
    while len(canvas) < num_shapes:
        shape = random_shape(rng, ids)
        attempts += 1
        sig = signature(shape)
        if sig in seen:
            logger.debug("Discarded shape %d: duplicate %s", shape.id, sig)
            continue
        canvas.add_shape(shape)
        seen.add(sig)

    logger.debug("Filled canvas with %d shapes in %d attempts", len(canvas), attempts)
    return canvas


def format_shape(shape: Shape) -> str:
    return f"Shape {shape.id}: {signature(shape)}"


def format_report(canvas: Canvas) -> List[str]:
    """Header, blank line, then one line per shape in canvas order."""
    lines = [REPORT_HEADER, ""]
    lines.extend(format_shape(s) for s in canvas.get_shapes())
    return lines


def main(argv=None):
    p = argparse.ArgumentParser(description="Print a canvas of unique random shapes")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for a reproducible canvas (default: unseeded)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log discarded duplicates to stderr")
    args = p.parse_args(argv)

    setup_logging(args.verbose)
    canvas = fill_canvas(np.random.default_rng(args.seed))
    for line in format_report(canvas):
        print(line)


if __name__ == "__main__":
    main()
