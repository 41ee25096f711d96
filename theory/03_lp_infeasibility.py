"""
PROOF: The lemma systems on single-crossing triples are infeasible
===================================================================

For each of the 151 single-crossing profiles (id, sigma1, sigma2) over four
candidates and each pivot c2, the linear system built from premise (5) and
condition (2) has no real solution. Both the '>=' and the '>' variants are
checked with z3; the '>=' variant is additionally confirmed with scipy.
"""

import io
import sys
import time

from single_crossing import single_crossing_triples, verify_all


if __name__ == "__main__":
    print("=" * 60)
    print("PROOF: 151 x 4 lemma systems are infeasible")
    print("=" * 60)
    print()

    n_triples = sum(1 for _ in single_crossing_triples())
    print("  single-crossing triples: {} (expected 151)".format(n_triples))
    ok = n_triples == 151

    for strict in (False, True):
        t0 = time.time()
        cnt = verify_all(strict=strict, cross_check=not strict, progress=io.StringIO())
        print("  {} variant: {} profiles, all unsat ({:.1f}s)".format(
            ">" if strict else ">=", cnt, time.time() - t0))
        ok = ok and cnt == 151

    print()
    print("STATUS: {}".format("VERIFIED" if ok else "FAILED"))
    print("=" * 60)
    sys.exit(0 if ok else 1)
