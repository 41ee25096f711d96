"""
Grid Preference Profiles
========================

A grid profile is an N x M list of lists of cells. A cell is either a
preference list (tuple) or UNKNOWN for a voter whose preferences have not
been decided yet. Voter (i, j) sits in row i, column j.

Functions:
    empty_grid   -- all-unknown N x M profile
    shape        -- (N, M) of a profile, checking it is non-degenerate
    pref_box     -- bounding box of voters preferring c0 to c1
    dom_box      -- bounding box of voters whose top choice is c
    format_grid  -- text rendering ('?' / digit strings, '####' terminator)
    parse_grid   -- inverse of format_grid

License: MIT
"""

from single_crossing.preferences import (
    prefers, format_preference, parse_preference,
)
from single_crossing.rect import EMPTY


UNKNOWN = None
TERMINATOR = "####"


class ShapeViolation(ValueError):
    """A grid has no rows, no columns, or rows of different lengths."""


def empty_grid(N, M):
    if N <= 0 or M <= 0:
        raise ShapeViolation("Grid shape must be positive, got {}x{}".format(N, M))
    return [[UNKNOWN] * M for _ in range(N)]


def shape(g):
    N = len(g)
    if N == 0:
        raise ShapeViolation("Grid has no rows")
    M = len(g[0])
    if M == 0:
        raise ShapeViolation("Grid has no columns")
    for row in g:
        if len(row) != M:
            raise ShapeViolation("Ragged grid: rows of length {} and {}".format(M, len(row)))
    return N, M


def assigned_cells(g):
    """Yield (i, j, p) for every decided voter."""
    for i, row in enumerate(g):
        for j, p in enumerate(row):
            if p is not UNKNOWN:
                yield i, j, p


def freeze(g):
    """Immutable snapshot of g (tuple of tuples)."""
    return tuple(tuple(row) for row in g)


def pref_box(g, c0, c1):
    shape(g)
    box = EMPTY
    for i, j, p in assigned_cells(g):
        if prefers(p, c0, c1):
            box = box.add(i, j)
    return box


def dom_box(g, c):
    shape(g)
    box = EMPTY
    for i, j, p in assigned_cells(g):
        if p[0] == c:
            box = box.add(i, j)
    return box


# =====================================================================
# TEXT FORMAT
# =====================================================================

def format_grid(g):
    """Render g as N lines of M tokens followed by the '####' line."""
    shape(g)
    lines = []
    for row in g:
        lines.append(" ".join("?" if p is UNKNOWN else format_preference(p) for p in row))
    lines.append(TERMINATOR)
    return "\n".join(lines) + "\n"


def parse_grid(text):
    """Parse the first grid in text (up to its '####' line)."""
    g = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line == TERMINATOR:
            break
        g.append([UNKNOWN if tok == "?" else parse_preference(tok) for tok in line.split()])
    shape(g)
    return g
