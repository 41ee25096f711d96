"""
Grid Predicates
===============

Checks on (possibly incomplete) grid preference profiles. The enumerator
uses grid_valid and grid_has_fast_cross for pruning, so both only look at
decided voters and can only flip from True to False (resp. False to True)
as more voters are decided.

Functions:
    grid_valid           -- False only if g is certainly not single-crossing
    is_monodominated     -- all voters share the same top choice
    admits_split_line    -- some grid line crosses no dominance box
    split_lines          -- all such lines
    has_isolated         -- some dominance box touches no side of the grid
    grid_has_fast_cross  -- adjacent voters differing in more than one pair

License: MIT
"""

from single_crossing.grid import shape, pref_box, dom_box, assigned_cells, UNKNOWN
from single_crossing.preferences import cnt_crosses


def grid_valid(g, C):
    """Returns False if and only if it is certain that g is not single-crossing.

    On a single-crossing profile the voters preferring c0 to c1 and those
    preferring c1 to c0 are separated by a monotone staircase, so their
    bounding boxes cannot overlap. Boxes only grow as voters are decided.
    """
    shape(g)
    for c0 in range(C):
        for c1 in range(c0 + 1, C):
            if pref_box(g, c0, c1).intersects(pref_box(g, c1, c0)):
                return False
    return True


def is_monodominated(g):
    """Whether every decided voter ranks candidate 0 first.

    Voter (0, 0) is fixed to 0 > ... > C - 1, so this is the same as all
    voters having the same most preferred candidate.
    """
    shape(g)
    return all(p[0] == 0 for _, _, p in assigned_cells(g))


def dominance_boxes(g, C):
    """Non-empty dominance boxes, keyed by candidate."""
    boxes = {}
    for c in range(C):
        box = dom_box(g, c)
        if not box.is_empty:
            boxes[c] = box
    return boxes


def split_lines(g, C):
    """All grid lines crossed by no dominance box.

    Returns ("horizontal", i) for the line between rows i and i + 1 and
    ("vertical", j) for the line between columns j and j + 1.
    """
    N, M = shape(g)
    boxes = list(dominance_boxes(g, C).values())
    lines = []
    for i in range(N - 1):
        if not any(box.crosses_horizontal(i) for box in boxes):
            lines.append(("horizontal", i))
    for j in range(M - 1):
        if not any(box.crosses_vertical(j) for box in boxes):
            lines.append(("vertical", j))
    return lines


def admits_split_line(g, C):
    """Whether the tiling formed by the dominance boxes admits a split line
    (the first cut of a non-trivial sliceable tiling)."""
    N, M = shape(g)
    boxes = [dom_box(g, c) for c in range(C)]
    for i in range(N - 1):
        if not any(box.crosses_horizontal(i) for box in boxes):
            return True
    for j in range(M - 1):
        if not any(box.crosses_vertical(j) for box in boxes):
            return True
    return False


def has_isolated(g, C):
    N, M = shape(g)
    for c in range(C):
        box = dom_box(g, c)
        if box.is_empty:  # c is nobody's top choice
            continue
        if not box.touches_boundary(N, M):
            return True
    return False


def grid_has_fast_cross(g, C):
    N, M = shape(g)
    for i in range(N):
        for j in range(M):
            p = g[i][j]
            if p is UNKNOWN:
                continue
            if i + 1 < N and g[i + 1][j] is not UNKNOWN and cnt_crosses(p, g[i + 1][j], C) > 1:
                return True
            if j + 1 < M and g[i][j + 1] is not UNKNOWN and cnt_crosses(p, g[i][j + 1], C) > 1:
                return True
    return False
