from single_crossing.rect import Rect, EMPTY


def test_first_point_gives_single_cell():
    r = EMPTY.add(2, 3)
    assert (r.r0, r.r1, r.c0, r.c1) == (2, 2, 3, 3)
    assert not r.is_empty
    assert EMPTY.is_empty


def test_add_contains_old_box_and_point():
    r = EMPTY.add(1, 1).add(2, 4)
    grown = r.add(0, 2)
    assert grown.contains(r)
    assert grown.contains_point(0, 2)
    assert (grown.r0, grown.r1, grown.c0, grown.c1) == (0, 2, 1, 4)


def test_add_is_order_independent():
    r = EMPTY.add(1, 2)
    assert r.add(3, 0).add(0, 5) == r.add(0, 5).add(3, 0)


def test_union_matches_adding_points():
    a = EMPTY.add(0, 0).add(1, 1)
    b = EMPTY.add(3, 2)
    assert a.union(b) == a.add(3, 2)
    assert a.union(EMPTY) == a


def test_intersection():
    a = Rect(0, 1, 0, 1)
    assert a.intersects(Rect(1, 2, 1, 2))  # shares corner cell (1, 1)
    assert not a.intersects(Rect(2, 3, 0, 1))
    assert not a.intersects(Rect(0, 1, 2, 2))
    assert Rect(0, 5, 2, 2).intersects(Rect(3, 3, 0, 4))


def test_empty_never_intersects():
    assert not EMPTY.intersects(Rect(0, 10, 0, 10))
    assert not Rect(0, 10, 0, 10).intersects(EMPTY)
    assert not EMPTY.intersects(EMPTY)


def test_line_crossing_is_strict_on_far_end():
    single_row = Rect(2, 2, 0, 0)
    assert not single_row.crosses_horizontal(1)
    assert not single_row.crosses_horizontal(2)

    two_rows = Rect(1, 2, 0, 0)
    assert [two_rows.crosses_horizontal(i) for i in range(4)] == [False, True, False, False]

    cols = Rect(0, 0, 0, 2)
    assert [cols.crosses_vertical(j) for j in range(3)] == [True, True, False]


def test_empty_crosses_nothing():
    assert not EMPTY.crosses_horizontal(0)
    assert not EMPTY.crosses_vertical(0)


def test_touches_boundary():
    assert not Rect(1, 1, 1, 1).touches_boundary(3, 3)
    assert Rect(1, 2, 1, 1).touches_boundary(3, 3)
    assert Rect(0, 0, 1, 1).touches_boundary(3, 3)
    assert not EMPTY.touches_boundary(3, 3)
