"""
Global configuration: shape kind registry, dimension bounds, canvas size.

The index of a kind in ``KINDS`` is the value the shape factory draws for it,
so the order here is part of the random-draw contract.
"""

# ---------------------------------------------------------------------------
# Shape kinds (4 slots, all active)
# ---------------------------------------------------------------------------

KINDS = [
    "OVAL",         # 0  horizontal + vertical radius
    "CIRCLE",       # 1  single radius
    "RECTANGLE",    # 2  length + width
    "SQUARE",       # 3  single side
]

KIND_MAP = {name: i for i, name in enumerate(KINDS)}
NUM_KINDS = len(KINDS)                     # 4

# ---------------------------------------------------------------------------
# Dimension bounds (inclusive)
# ---------------------------------------------------------------------------

DIM_MIN = 1
DIM_MAX = 100

# ---------------------------------------------------------------------------
# Canvas / report
# ---------------------------------------------------------------------------

CANVAS_SHAPES = 10      # unique shapes collected by the driver
REPORT_HEADER = "Canvas has the following random shapes:"
