"""
Backtracking Enumerator
=======================

Explores every complete grid single-crossing profile of a given shape and
tests a structural hypothesis on each of them.

It is enough to consider k = C and only look at the most preferred
candidate of each voter: if a property fails for an optimal k-tiling, it
also fails on the same instance once all candidates outside the elected
committee are removed. Voter (0, 0) is assumed to prefer 0 > ... > C - 1.

Hypotheses:
    sliceable -- every optimal k-tiling is sliceable (H1)
    boundary  -- every rectangle of an optimal k-tiling touches a side (H2)

Classes:
    EnumerationConfig  - shape, hypothesis and pruning options
    EnumerationReport  - leaves counted and witnesses found
    GridEnumerator     - the search itself

License: MIT
"""

import sys
from dataclasses import dataclass, field
from typing import List

from single_crossing.grid import empty_grid, freeze, format_grid, ShapeViolation, UNKNOWN
from single_crossing.preferences import identity, permutations_lex
from single_crossing.predicates import (
    grid_valid, grid_has_fast_cross, admits_split_line, is_monodominated, has_isolated,
)


# ---------------------------------------------------------------------------
# Hypotheses
# ---------------------------------------------------------------------------

def violates_sliceable(g, C):
    return not admits_split_line(g, C) and not is_monodominated(g)


def violates_boundary(g, C):
    return has_isolated(g, C)


HYPOTHESES = {
    "sliceable": violates_sliceable,
    "boundary": violates_boundary,
}


class HypothesisViolated(Exception):
    """A complete profile on which the hypothesis under test fails."""

    def __init__(self, grid, hypothesis):
        super().__init__("Hypothesis '{}' violated by:\n{}".format(
            hypothesis, format_grid(grid)))
        self.grid = grid
        self.hypothesis = hypothesis


# ---------------------------------------------------------------------------
# Configuration & report
# ---------------------------------------------------------------------------

@dataclass
class EnumerationConfig:
    """Parameters of one enumeration run."""
    rows: int = 4
    cols: int = 5
    candidates: int = 5
    hypothesis: str = "sliceable"
    # Only grids where adjacent voters differ in at most one pair.
    forbid_fast_cross: bool = False
    progress_every: int = 100
    stop_at_first: bool = True

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ShapeViolation(
                "Grid shape must be positive, got {}x{}".format(self.rows, self.cols))
        if not 1 <= self.candidates <= 10:
            raise ValueError(
                "Number of candidates must be in [1, 10], got {}".format(self.candidates))
        if self.hypothesis not in HYPOTHESES:
            raise ValueError("Unknown hypothesis: {} (expected one of {})".format(
                self.hypothesis, ", ".join(sorted(HYPOTHESES))))
        if self.progress_every <= 0:
            raise ValueError("progress_every must be positive")


@dataclass
class EnumerationReport:
    config: EnumerationConfig
    profiles: int = 0
    witnesses: List[tuple] = field(default_factory=list)

    @property
    def holds(self):
        return not self.witnesses


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

class GridEnumerator:
    """Backtracking search over grid profiles in row-major order.

    The grid is the only mutable state. Each recursion level decides one
    voter and resets it to UNKNOWN before returning.
    """

    def __init__(self, config=None, progress=None):
        self.config = config or EnumerationConfig()
        self.progress = progress if progress is not None else sys.stderr
        self.count = 0
        self.grid = empty_grid(self.config.rows, self.config.cols)

    def profiles(self):
        """Yield every complete profile that passes grid_valid (and the
        fast-cross restriction when enabled), as an immutable snapshot."""
        self.count = 0
        yield from self._backtrack(0, 0)

    def _backtrack(self, r, c):
        g, C = self.grid, self.config.candidates
        N, M = self.config.rows, self.config.cols

        if self.config.forbid_fast_cross and grid_has_fast_cross(g, C):
            return
        # Prune profiles which can not be single-crossing early.
        if not grid_valid(g, C):
            return
        if r == N:
            self.count += 1
            if self.count % self.config.progress_every == 0:
                print("Processed {} grid profiles.".format(self.count),
                      file=self.progress, flush=True)
            yield freeze(g)
        elif c == M:
            yield from self._backtrack(r + 1, 0)
        else:
            if r == 0 and c == 0:
                choices = [identity(C)]
            else:
                choices = permutations_lex(C)
            try:
                for p in choices:
                    g[r][c] = p
                    yield from self._backtrack(r, c + 1)
            finally:
                g[r][c] = UNKNOWN

    def run(self):
        """Test the configured hypothesis on every profile.

        Raises HypothesisViolated on the first witness when
        config.stop_at_first is set, otherwise collects all of them.
        """
        cfg = self.config
        violates = HYPOTHESES[cfg.hypothesis]
        report = EnumerationReport(config=cfg)
        for g in self.profiles():
            report.profiles = self.count
            if violates(g, cfg.candidates):
                if cfg.stop_at_first:
                    raise HypothesisViolated(g, cfg.hypothesis)
                report.witnesses.append(g)
        report.profiles = self.count
        return report
