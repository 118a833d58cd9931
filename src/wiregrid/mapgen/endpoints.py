# src/wiregrid/mapgen/endpoints.py
from typing import List, Tuple

from ..rng import SeededRandom

Pos = Tuple[int, int]

# Share of the distance-ranked perimeter the end cell is drawn from.
END_CANDIDATE_SHARE = 0.25


def choose_start(width: int, height: int, rng: SeededRandom) -> Pos:
    """Random edge first (top, right, bottom, left), then a random cell on it."""
    edge = rng.next_int(0, 3)
    if edge == 0:
        return (rng.next_int(0, width - 1), 0)
    if edge == 1:
        return (width - 1, rng.next_int(0, height - 1))
    if edge == 2:
        return (rng.next_int(0, width - 1), height - 1)
    return (0, rng.next_int(0, height - 1))


def perimeter_candidates(width: int, height: int) -> List[Pos]:
    # Corners show up twice, once per loop, which doubles their weight.
    out: List[Pos] = []
    for x in range(width):
        out.append((x, 0))
        out.append((x, height - 1))
    for y in range(height):
        out.append((0, y))
        out.append((width - 1, y))
    return out


def choose_end(width: int, height: int, start: Pos, rng: SeededRandom) -> Pos:
    """Pick uniformly among the most distant quarter of the perimeter."""
    sx, sy = start
    cands = perimeter_candidates(width, height)
    # sorted() is stable: equal distances keep enumeration order.
    cands = sorted(cands, key=lambda p: abs(p[0] - sx) + abs(p[1] - sy), reverse=True)
    top = cands[:max(1, int(len(cands) * END_CANDIDATE_SHARE))]
    return rng.pick(top)


def choose_endpoints(width: int, height: int, rng: SeededRandom) -> Tuple[Pos, Pos]:
    start = choose_start(width, height, rng)
    return start, choose_end(width, height, start, rng)
