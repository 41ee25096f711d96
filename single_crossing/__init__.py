"""
Single-Crossing Grid Tilings
============================

Computational certificates for the structure of optimal k-tilings of grid
single-crossing preference profiles.

Experiments:
  G - exhaustive enumeration of grid single-crossing profiles, testing
      H1 (optimal k-tilings are sliceable) and H2 (every rectangle of an
      optimal k-tiling touches the side of the grid)
  L - infeasibility of the 151 x 4 linear systems of the lemma on
      single-crossing triples, decided with z3

License: MIT
"""

__version__ = "0.1.0"

from single_crossing.preferences import (
    MalformedPreference,
    pos, prefers, cnt_crosses, identity, permutations_lex,
    format_preference, parse_preference,
)
from single_crossing.rect import Rect, EMPTY
from single_crossing.grid import (
    UNKNOWN, ShapeViolation,
    empty_grid, shape, pref_box, dom_box, format_grid, parse_grid,
)
from single_crossing.predicates import (
    grid_valid,
    is_monodominated,
    admits_split_line,
    split_lines,
    dominance_boxes,
    has_isolated,
    grid_has_fast_cross,
)
from single_crossing.enumerator import (
    EnumerationConfig, EnumerationReport, GridEnumerator,
    HypothesisViolated, HYPOTHESES,
)
from single_crossing.lp import (
    single_crossing, single_crossing_triples,
    build_lemma_system, LinearSystem, LinearConstraint,
    check_infeasible, cross_check_infeasible, verify_all,
    UnexpectedFeasible, SolverError,
)
