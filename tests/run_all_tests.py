"""
Run all certificate scripts under theory/.

Each script is a self-contained check that prints VERIFIED/FAILED and
exits non-zero on failure. The pytest suite next to this file covers the
library itself.
"""

import subprocess
import sys
import os
import time


def run_script(path, name, base):
    """Run a certificate script from the repository root and capture output."""
    print("\n" + "=" * 60)
    print("RUNNING: {}".format(name))
    print("=" * 60)

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (base, env.get("PYTHONPATH")) if p)

    t0 = time.time()
    result = subprocess.run(
        [sys.executable, path],
        capture_output=True, text=True, timeout=600, cwd=base, env=env,
    )
    elapsed = time.time() - t0

    print(result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr[-500:])

    passed = result.returncode == 0
    return passed, elapsed


if __name__ == "__main__":
    base = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    theory_dir = os.path.join(base, "theory")

    tests = [
        ("01_h2_counterexample.py", "Hypothesis 2 Counterexample"),
        ("02_h1_small_shapes.py", "Hypothesis 1 on Small Grids"),
        ("03_lp_infeasibility.py", "Lemma Systems Infeasible"),
    ]

    results = []
    for filename, name in tests:
        path = os.path.join(theory_dir, filename)
        if os.path.exists(path):
            try:
                passed, elapsed = run_script(path, name, base)
                results.append((name, passed, elapsed))
            except subprocess.TimeoutExpired:
                print("  TIMEOUT after 600s")
                results.append((name, False, 600))
        else:
            print("  FILE NOT FOUND: {}".format(path))
            results.append((name, False, 0))

    print("\n\n" + "=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)
    print()
    all_pass = True
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        if not passed:
            all_pass = False
        print("  [{}] {} ({:.1f}s)".format(status, name, elapsed))

    print()
    if all_pass:
        print("ALL TESTS PASSED")
    else:
        print("SOME TESTS FAILED")
    print("=" * 60)
    sys.exit(0 if all_pass else 1)
