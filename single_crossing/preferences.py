"""
Preference Algebra
==================

Individual preference lists over candidates {0, ..., C - 1}.

A preference list is a tuple whose i-th entry is the candidate ranked at
position i, so (0, 2, 1) means 0 > 2 > 1.

Functions:
    pos                -- position of a candidate in a preference list
    prefers            -- whether one candidate is ranked above another
    cnt_crosses        -- number of candidate pairs two lists disagree on
    permutations_lex   -- all preference lists in lexicographic order

License: MIT
"""

import numpy as np
from itertools import permutations


class MalformedPreference(ValueError):
    """A candidate lookup in a preference list failed."""


def identity(C):
    """The preference list 0 > 1 > ... > C - 1."""
    return tuple(range(C))


def permutations_lex(C):
    """Yield every preference list over C candidates exactly once, in
    lexicographic order, starting from the identity."""
    return permutations(range(C))


def is_permutation(p, C):
    return len(p) == C and sorted(p) == list(range(C))


def pos(p, c):
    """Index of candidate c in p (0 if c is most preferred)."""
    for i, x in enumerate(p):
        if x == c:
            return i
    raise MalformedPreference(
        "Could not find candidate {} in {}".format(c, format_preference(p)))


def prefers(p, c0, c1):
    return pos(p, c0) < pos(p, c1)


def inverse(p):
    """Inverse permutation: inverse(p)[c] == pos(p, c)."""
    p = np.asarray(p, dtype=np.int64)
    inv = np.empty_like(p)
    inv[p] = np.arange(len(p))
    return inv


def cnt_crosses(p0, p1, C):
    """Kendall distance between p0 and p1.

    Counts unordered pairs {c0, c1} ranked c0 > c1 in one list and
    c1 > c0 in the other.
    """
    if not (is_permutation(p0, C) and is_permutation(p1, C)):
        raise MalformedPreference(
            "Expected two permutations of {} candidates, got {} and {}".format(
                C, format_preference(p0), format_preference(p1)))
    inv0, inv1 = inverse(p0), inverse(p1)
    before0 = inv0[:, None] < inv0[None, :]
    before1 = inv1[:, None] < inv1[None, :]
    upper = np.triu(np.ones((C, C), dtype=bool), k=1)
    return int(np.count_nonzero((before0 != before1) & upper))


# =====================================================================
# TEXT FORMAT
# =====================================================================

def format_preference(p):
    """Digit string for p, e.g. '01234' for 0 > 1 > 2 > 3 > 4."""
    return "".join(str(c) for c in p)


def parse_preference(token):
    if not token.isdigit():
        raise MalformedPreference("Not a preference list: {!r}".format(token))
    p = tuple(int(ch) for ch in token)
    if not is_permutation(p, len(p)):
        raise MalformedPreference("Not a permutation: {!r}".format(token))
    return p
