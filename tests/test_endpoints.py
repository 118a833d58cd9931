from wiregrid.mapgen.endpoints import choose_end, choose_endpoints, choose_start, perimeter_candidates
from wiregrid.rng import SeededRandom


def _on_perimeter(p, w, h):
    x, y = p
    return x in (0, w - 1) or y in (0, h - 1)


def test_candidates_count_corners_twice():
    cands = perimeter_candidates(5, 4)
    assert len(cands) == 2 * 5 + 2 * 4
    assert cands.count((0, 0)) == 2
    assert cands.count((4, 3)) == 2
    assert cands.count((2, 0)) == 1
    # x-loop first: top then bottom for each column
    assert cands[:4] == [(0, 0), (0, 3), (1, 0), (1, 3)]


def test_start_is_on_perimeter():
    for seed in range(50):
        s = choose_start(6, 4, SeededRandom(seed))
        assert _on_perimeter(s, 6, 4)


def test_end_from_farthest_quarter():
    # From (0,0) on 5x5 the top 5 candidates are (4,4) twice, (3,4), (4,3), (2,4).
    allowed = {(4, 4), (3, 4), (4, 3), (2, 4)}
    seen = set()
    for seed in range(60):
        e = choose_end(5, 5, (0, 0), SeededRandom(seed))
        assert e in allowed
        seen.add(e)
    assert seen == allowed


def test_endpoints_differ_and_sit_on_edges():
    for seed in range(40):
        start, end = choose_endpoints(5, 5, SeededRandom(seed))
        assert start != end
        assert _on_perimeter(start, 5, 5) and _on_perimeter(end, 5, 5)


def test_tiny_grid_still_has_an_end():
    start, end = choose_endpoints(2, 2, SeededRandom(0))
    assert start != end
