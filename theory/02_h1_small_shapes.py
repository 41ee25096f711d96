"""
EVIDENCE: Optimal k-tilings of small grids are sliceable
========================================================

Runs the exhaustive enumeration for Hypothesis 1 on shapes small enough to
finish in seconds and checks the expected number of profiles on the two
smallest ones:

    N = M = 1, C = 3     ->  exactly one profile {{012}}
    N = 1, M = 2, C = 2  ->  {{01, 01}} and {{01, 10}}

Larger shapes (up to N, M, C = 4, 5, 5) are run with
`python -m experiments.run_grid`.
"""

import io
import sys
import time

from single_crossing import EnumerationConfig, GridEnumerator


SHAPES = [
    # (N, M, C, expected number of profiles or None)
    (1, 1, 3, 1),
    (1, 2, 2, 2),
    (2, 2, 3, None),
    (2, 3, 3, None),
    (3, 3, 3, None),
    (2, 2, 4, None),
]


if __name__ == "__main__":
    print("=" * 60)
    print("EVIDENCE: Hypothesis 1 on small grids")
    print("=" * 60)
    print()

    all_ok = True
    for N, M, C, expected in SHAPES:
        t0 = time.time()
        config = EnumerationConfig(rows=N, cols=M, candidates=C,
                                   hypothesis="sliceable", stop_at_first=False)
        report = GridEnumerator(config, progress=io.StringIO()).run()
        ok = report.holds and (expected is None or report.profiles == expected)
        all_ok = all_ok and ok
        print("  N={} M={} C={}: {:>6} profiles, {} witnesses ({:.1f}s) {}".format(
            N, M, C, report.profiles, len(report.witnesses), time.time() - t0,
            "OK" if ok else "FAIL"))

    print()
    print("STATUS: {}".format("VERIFIED" if all_ok else "FAILED"))
    print("=" * 60)
    sys.exit(0 if all_ok else 1)
