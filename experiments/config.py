"""
Experiment configuration.
=========================

Default run parameters and the record of shapes already settled.

Hypothesis 1 (all optimal k-tilings are sliceable) was confirmed for the
shapes in CONFIRMED_SHAPES; the entries with forbid_fast_cross assume
neighbouring voters differ in at most one pair of candidates.

Hypothesis 2 (all rectangles of an optimal k-tiling touch the sides of the
grid) fails on H2_COUNTEREXAMPLE, where candidate 2 only wins voter (1, 1).
"""

from single_crossing.enumerator import EnumerationConfig


# --- Default run parameters ---

DEFAULT_GRID_CONFIG = EnumerationConfig(
    rows=4,
    cols=5,
    candidates=5,
    hypothesis="sliceable",
    forbid_fast_cross=False,
    progress_every=100,
    stop_at_first=True,
)

DEFAULT_LP_CONFIG = {
    "strict": False,
    "cross_check": False,
}


# --- Settled shapes ---
# Each entry: (N, M, C, forbid_fast_cross)

CONFIRMED_SHAPES = [
    (8, 8, 4, False),
    (4, 5, 5, False),
    (3, 6, 5, False),
    (3, 3, 6, False),
    (6, 6, 6, True),
]

H2_COUNTEREXAMPLE = """\
01234 02134 03214
12304 21304 32104
41230 42130 43210
####
"""
