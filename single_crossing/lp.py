"""
Lemma Linear Programs
=====================

For every single-crossing profile P = (id, sigma1, sigma2) of three voters
over candidates {1, 2, 3, 4} and every pivot c2 in {1, 2, 3, 4}, builds the
real linear system over the variables r(v, c), v in {1, 2, 3}, obtained from
premise (5) and condition (2) of the lemma, and checks that it is
infeasible. There are 151 such profiles, hence 604 systems.

Preference lists here follow the paper's 1-based notation: sigma is a
tuple of the 4 candidates, most preferred first.

Functions:
    single_crossing          -- is (id, sigma1, sigma2) single-crossing
    single_crossing_triples  -- all accepted (sigma1, sigma2) pairs
    build_lemma_system       -- the linear system for (sigma1, sigma2, c2)
    check_infeasible         -- exact verdict with z3
    cross_check_infeasible   -- floating-point verdict with scipy (HiGHS)
    verify_all               -- run every system

License: MIT
"""

import sys
from collections import defaultdict
from dataclasses import dataclass, field
from itertools import permutations
from typing import Dict, List, Tuple

import numpy as np
import z3
from scipy.optimize import linprog


VOTERS = (1, 2, 3)
CANDIDATES = (1, 2, 3, 4)
SENSES = ("==", "<=", ">=", ">")


class UnexpectedFeasible(Exception):
    """A lemma system that should be infeasible has a solution."""

    def __init__(self, system, model):
        super().__init__("Expected an infeasible system for {}, got model:\n{}".format(
            system.label, model))
        self.system = system
        self.model = model


class SolverError(RuntimeError):
    """The decision procedure could not decide a system."""


# =====================================================================
# SINGLE-CROSSING TRIPLES
# =====================================================================

def _positions(sigma):
    return {c: i for i, c in enumerate(sigma)}


def single_crossing(sigma1, sigma2):
    """Whether (id, sigma1, sigma2) is single-crossing in this order.

    Every pair a < b already swapped by sigma1 has to stay swapped in sigma2.
    """
    where1, where2 = _positions(sigma1), _positions(sigma2)
    for a in CANDIDATES:
        for b in CANDIDATES:
            if a < b and where1[a] > where1[b] and where2[a] < where2[b]:
                return False
    return True


def single_crossing_triples():
    """Yield (sigma1, sigma2) with (id, sigma1, sigma2) single-crossing,
    both enumerated in lexicographic order."""
    for sigma1 in permutations(CANDIDATES):
        for sigma2 in permutations(CANDIDATES):
            if single_crossing(sigma1, sigma2):
                yield sigma1, sigma2


# =====================================================================
# LINEAR SYSTEM
# =====================================================================

@dataclass
class LinearConstraint:
    """sum(coeffs[var] * var)  <sense>  rhs, with var = (voter, candidate)."""
    coeffs: Dict[Tuple[int, int], int]
    sense: str
    rhs: int = 0

    def __post_init__(self):
        if self.sense not in SENSES:
            raise ValueError("Unknown constraint sense: {}".format(self.sense))
        self.coeffs = {v: k for v, k in self.coeffs.items() if k != 0}


@dataclass
class LinearSystem:
    sigma1: tuple
    sigma2: tuple
    c2: int
    constraints: List[LinearConstraint] = field(default_factory=list)
    variables: List[Tuple[int, int]] = field(
        default_factory=lambda: [(v, c) for v in VOTERS for c in CANDIDATES])

    @property
    def label(self):
        return "sigma1={} sigma2={} c2={}".format(
            "".join(map(str, self.sigma1)), "".join(map(str, self.sigma2)), self.c2)

    @property
    def strict(self):
        return any(con.sense == ">" for con in self.constraints)

    def add(self, coeffs, sense, rhs=0):
        self.constraints.append(LinearConstraint(dict(coeffs), sense, rhs))

    def to_z3(self):
        """A z3 solver holding this system; r(v, c) is the real 'r_v_c'."""
        ctx = z3.Context()
        r = {(v, c): z3.Real("r_{}_{}".format(v, c), ctx) for v, c in self.variables}
        s = z3.Solver(ctx=ctx)
        for con in self.constraints:
            terms = [k * r[var] for var, k in con.coeffs.items()]
            if not terms:
                lhs = z3.RealVal(0, ctx)
            elif len(terms) == 1:
                lhs = terms[0]
            else:
                lhs = z3.Sum(terms)
            rhs = z3.RealVal(con.rhs, ctx)
            if con.sense == "==":
                s.add(lhs == rhs)
            elif con.sense == "<=":
                s.add(lhs <= rhs)
            elif con.sense == ">=":
                s.add(lhs >= rhs)
            else:
                s.add(lhs > rhs)
        return s

    def to_matrices(self):
        """(A_ub, b_ub, A_eq, b_eq) for scipy.optimize.linprog.

        Only non-strict systems have a matrix form.
        """
        if self.strict:
            raise ValueError("Strict inequalities have no linprog form")
        index = {var: i for i, var in enumerate(self.variables)}
        A_ub, b_ub, A_eq, b_eq = [], [], [], []
        for con in self.constraints:
            row = np.zeros(len(self.variables))
            for var, k in con.coeffs.items():
                row[index[var]] = k
            if con.sense == "==":
                A_eq.append(row)
                b_eq.append(con.rhs)
            elif con.sense == "<=":
                A_ub.append(row)
                b_ub.append(con.rhs)
            else:
                A_ub.append(-row)
                b_ub.append(-con.rhs)
        n = len(self.variables)
        return (np.array(A_ub).reshape(-1, n), np.array(b_ub, dtype=float),
                np.array(A_eq).reshape(-1, n), np.array(b_eq, dtype=float))


def build_lemma_system(sigma1, sigma2, c2, margin=1, strict=False):
    """Linear system for P = (id, sigma1, sigma2) and pivot c2.

    Premise (5):
        r(1, 1) = r(2, sigma1[1]) = r(3, sigma2[1]) = 0 and each r(v, .) is
        non-decreasing along voter v's preference order.
    Condition (2):
        r(1, c) + r(2, c) + r(2, c1) + r(3, c1)
            >= margin + r(1, c2) + r(2, c2) + r(3, c2)   for all c, c1.
    With strict=True the condition uses '>' instead, which gives the
    same verdicts.
    """
    if c2 not in CANDIDATES:
        raise ValueError("Pivot must be one of {}, got {}".format(CANDIDATES, c2))
    orders = {1: tuple(CANDIDATES), 2: tuple(sigma1), 3: tuple(sigma2)}
    for v, order in orders.items():
        if sorted(order) != list(CANDIDATES):
            raise ValueError("Voter {} order is not a permutation of {}: {}".format(
                v, CANDIDATES, order))

    system = LinearSystem(tuple(sigma1), tuple(sigma2), c2)
    for v, order in orders.items():
        system.add({(v, order[0]): 1}, "==")
    for v, order in orders.items():
        for a, b in zip(order, order[1:]):
            system.add({(v, a): 1, (v, b): -1}, "<=")
    sense = ">" if strict else ">="
    for c in CANDIDATES:
        for c1 in CANDIDATES:
            coeffs = defaultdict(int)
            for var in ((1, c), (2, c), (2, c1), (3, c1)):
                coeffs[var] += 1
            for v in VOTERS:
                coeffs[(v, c2)] -= 1
            system.add(coeffs, sense, margin)
    return system


# =====================================================================
# DECISION PROCEDURES
# =====================================================================

def check_infeasible(system):
    """Exact check with z3. Returns normally on 'unsat'."""
    s = system.to_z3()
    verdict = s.check()
    if verdict == z3.unsat:
        return
    if verdict == z3.sat:
        raise UnexpectedFeasible(system, s.model())
    raise SolverError("z3 returned '{}' on {}: {}".format(
        verdict, system.label, s.reason_unknown()))


def cross_check_infeasible(system):
    """Independent check with scipy's HiGHS backend (status 2 = infeasible)."""
    A_ub, b_ub, A_eq, b_eq = system.to_matrices()
    res = linprog(np.zeros(len(system.variables)),
                  A_ub=A_ub if len(A_ub) else None, b_ub=b_ub if len(b_ub) else None,
                  A_eq=A_eq if len(A_eq) else None, b_eq=b_eq if len(b_eq) else None,
                  bounds=(None, None), method="highs")
    if res.status == 2:
        return
    if res.status == 0:
        model = {"r_{}_{}".format(v, c): x for (v, c), x in zip(system.variables, res.x)}
        raise UnexpectedFeasible(system, model)
    raise SolverError("linprog failed on {}: {}".format(system.label, res.message))


def verify_all(strict=False, cross_check=False, progress=None):
    """Check every lemma system; returns the number of profiles processed."""
    progress = progress if progress is not None else sys.stderr
    cnt = 0
    for sigma1, sigma2 in single_crossing_triples():
        cnt += 1
        print("Processing profile {}".format(cnt), file=progress, flush=True)
        for c2 in CANDIDATES:
            system = build_lemma_system(sigma1, sigma2, c2, strict=strict)
            check_infeasible(system)
            if cross_check and not strict:
                cross_check_infeasible(system)
    return cnt
