"""
COUNTEREXAMPLE: Not every rectangle of an optimal k-tiling touches a side
==========================================================================

Hypothesis 2 claims that all rectangles in an optimal k-tiling of a grid
single-crossing profile touch the sides of the grid. It fails for
N = M = 3, C = 5 on the profile

    01234 02134 03214
    12304 21304 32104
    41230 42130 43210

Verification:
  (a) the profile is single-crossing on the grid (no pair of candidates
      has overlapping preference boxes),
  (b) candidate 2 wins only voter (1, 1), so its dominance box is strictly
      interior,
  (c) Hypothesis 1 does not fire on it (a split line exists or the
      profile is monodominated),
  (d) the enumerator exhibits a Hypothesis 2 counterexample at this shape.
"""

import io
import sys

from single_crossing import (
    parse_grid, format_grid, grid_valid, dom_box, has_isolated,
    admits_split_line, is_monodominated, split_lines,
    EnumerationConfig, GridEnumerator, HypothesisViolated,
)


PROFILE = """\
01234 02134 03214
12304 21304 32104
41230 42130 43210
####
"""


if __name__ == "__main__":
    print("=" * 60)
    print("COUNTEREXAMPLE: Hypothesis 2 at N = M = 3, C = 5")
    print("=" * 60)
    print()

    g = parse_grid(PROFILE)
    C = 5
    checks = []

    ok = grid_valid(g, C)
    print("  (a) single-crossing:           {}".format(ok))
    checks.append(ok)

    box = dom_box(g, 2)
    ok = has_isolated(g, C) and (box.r0, box.r1, box.c0, box.c1) == (1, 1, 1, 1)
    print("  (b) isolated dominance box:    {} ({})".format(ok, box))
    checks.append(ok)

    ok = admits_split_line(g, C) or is_monodominated(g)
    print("  (c) Hypothesis 1 holds:        {} (split lines: {})".format(
        ok, split_lines(g, C)))
    checks.append(ok)

    enumerator = GridEnumerator(
        EnumerationConfig(rows=3, cols=3, candidates=C, hypothesis="boundary"),
        progress=io.StringIO())
    witness = None
    try:
        enumerator.run()
    except HypothesisViolated as e:
        witness = e.grid
    ok = witness is not None and has_isolated(witness, C)
    print("  (d) enumerator finds witness:  {} (after {} profiles)".format(
        ok, enumerator.count))
    if witness is not None:
        print()
        print(format_grid(witness), end="")
    checks.append(ok)

    print()
    verified = all(checks)
    print("STATUS: {}".format("VERIFIED" if verified else "FAILED"))
    print("=" * 60)
    sys.exit(0 if verified else 1)
