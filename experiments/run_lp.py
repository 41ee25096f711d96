"""
Experiment L runner.
====================

Calls z3 on each of the 151 x 4 lemma systems. Any system that is not
'unsat' has its model printed to stdout and the process exits with
status 1; a solver failure exits with status 2.

Usage:
    python -m experiments.run_lp
    python -m experiments.run_lp --strict --cross-check
"""

import argparse
import sys
import time

from single_crossing.lp import verify_all, UnexpectedFeasible, SolverError

from experiments.config import DEFAULT_LP_CONFIG


def main(argv=None):
    parser = argparse.ArgumentParser(description="Lemma LP infeasibility check")
    parser.add_argument("--strict", action="store_true",
                        default=DEFAULT_LP_CONFIG["strict"],
                        help="Use '>' instead of '>=' in condition (2)")
    parser.add_argument("--cross-check", action="store_true",
                        default=DEFAULT_LP_CONFIG["cross_check"],
                        help="Confirm every verdict with scipy's HiGHS solver")
    args = parser.parse_args(argv)

    t0 = time.time()
    try:
        cnt = verify_all(strict=args.strict, cross_check=args.cross_check)
    except UnexpectedFeasible as e:
        print(e.model)
        return 1
    except SolverError as e:
        print("ERROR: {}".format(e), file=sys.stderr)
        return 2

    print("Done: {} profiles, {} systems infeasible in {:.1f}s.".format(
        cnt, 4 * cnt, time.time() - t0), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
