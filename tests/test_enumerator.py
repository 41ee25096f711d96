import io

import pytest

from single_crossing.enumerator import (
    EnumerationConfig,
    GridEnumerator,
    HypothesisViolated,
    HYPOTHESES,
    violates_sliceable,
    violates_boundary,
)
from single_crossing.grid import ShapeViolation, UNKNOWN, parse_grid
from single_crossing.predicates import admits_split_line, is_monodominated


def _enumerator(rows, cols, candidates, **kwargs):
    kwargs.setdefault("progress_every", 1000)
    config = EnumerationConfig(rows=rows, cols=cols, candidates=candidates, **kwargs)
    return GridEnumerator(config, progress=io.StringIO())


def test_single_voter_single_profile():
    enumerator = _enumerator(1, 1, 3)
    assert list(enumerator.profiles()) == [(((0, 1, 2),),)]
    report = enumerator.run()
    assert report.profiles == 1
    assert report.holds


def test_one_by_two_profiles():
    enumerator = _enumerator(1, 2, 2)
    grids = list(enumerator.profiles())
    assert grids == [
        (((0, 1), (0, 1)),),
        (((0, 1), (1, 0)),),
    ]
    assert is_monodominated(grids[0])
    assert not is_monodominated(grids[1])
    assert admits_split_line(grids[1], 2)
    assert enumerator.run().holds


def test_first_voter_is_identity_and_grid_restored():
    enumerator = _enumerator(2, 2, 3)
    grids = list(enumerator.profiles())
    assert grids
    assert all(g[0][0] == (0, 1, 2) for g in grids)
    assert len(set(grids)) == len(grids)
    assert all(p is UNKNOWN for row in enumerator.grid for p in row)


def test_progress_lines():
    out = io.StringIO()
    config = EnumerationConfig(rows=1, cols=2, candidates=2, progress_every=1)
    GridEnumerator(config, progress=out).run()
    assert out.getvalue() == "Processed 1 grid profiles.\nProcessed 2 grid profiles.\n"


def test_forbid_fast_cross_prunes():
    full = list(_enumerator(1, 2, 3).profiles())
    slow = list(_enumerator(1, 2, 3, forbid_fast_cross=True).profiles())
    # (0, 1, 2) next to any of the 6 orders; only 3 differ in at most one pair.
    assert len(full) == 6
    assert [g[0][1] for g in slow] == [(0, 1, 2), (0, 2, 1), (1, 0, 2)]


@pytest.mark.parametrize("shape", [(2, 2, 3), (2, 3, 3), (1, 4, 4)])
def test_sliceable_holds_on_small_shapes(shape):
    report = _enumerator(*shape, hypothesis="sliceable", stop_at_first=False).run()
    assert report.profiles > 0
    assert report.holds


def test_boundary_holds_without_interior():
    report = _enumerator(2, 3, 4, hypothesis="boundary", stop_at_first=False).run()
    assert report.holds


def test_stops_at_first_witness(monkeypatch):
    monkeypatch.setitem(HYPOTHESES, "sliceable", lambda g, C: True)
    enumerator = _enumerator(1, 2, 2)
    with pytest.raises(HypothesisViolated) as exc:
        enumerator.run()
    assert exc.value.grid == (((0, 1), (0, 1)),)
    assert exc.value.hypothesis == "sliceable"
    assert "01 01\n####" in str(exc.value)


def test_collects_all_witnesses(monkeypatch):
    monkeypatch.setitem(HYPOTHESES, "boundary", lambda g, C: g[0][1] == (1, 0))
    report = _enumerator(1, 2, 2, hypothesis="boundary", stop_at_first=False).run()
    assert report.profiles == 2
    assert report.witnesses == [(((0, 1), (1, 0)),)]
    assert not report.holds


def test_hypothesis_checks_on_known_profiles():
    h2 = parse_grid("01234 02134 03214\n12304 21304 32104\n41230 42130 43210\n####\n")
    assert violates_boundary(h2, 5)
    assert not violates_sliceable(h2, 5)

    pinwheel = parse_grid("01234 01234 10234\n30124 40123 10234\n30124 20134 20134\n####\n")
    assert violates_sliceable(pinwheel, 5)


def test_config_validation():
    with pytest.raises(ShapeViolation):
        EnumerationConfig(rows=0, cols=3)
    with pytest.raises(ValueError):
        EnumerationConfig(candidates=11)
    with pytest.raises(ValueError):
        EnumerationConfig(hypothesis="convex")
