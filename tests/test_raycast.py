import math

import pytest

from raycube.raycast import MIN_WALL_DISTANCE, cast_ray

GRID = [
    "1111111",
    "1000001",
    "1000001",
    "1000001",
    "1111111",
]
TILE = 64
PX = 2 * TILE + TILE / 2
PY = 2 * TILE + TILE / 2


def test_cast_east_hits_right_wall():
    ray = cast_ray(GRID, PX, PY, TILE, 0.0)
    assert ray.side == 0
    assert ray.step_x == 1
    assert (ray.map_x, ray.map_y) == (6, 2)
    assert GRID[ray.map_y][ray.map_x] == "1"
    assert ray.perp_wall_dist == pytest.approx(6 - PX / TILE)


def test_cast_west_hits_left_wall():
    ray = cast_ray(GRID, PX, PY, TILE, math.pi)
    assert ray.side == 0
    assert ray.step_x == -1
    assert ray.map_x == 0
    assert ray.perp_wall_dist == pytest.approx(PX / TILE - 1)


def test_cast_north_hits_top_wall():
    ray = cast_ray(GRID, PX, PY, TILE, 3 * math.pi / 2)
    assert ray.side == 1
    assert ray.step_y == -1
    assert (ray.map_x, ray.map_y) == (2, 0)
    assert ray.perp_wall_dist == pytest.approx(PY / TILE - 1)


def test_cast_south_hits_bottom_wall():
    ray = cast_ray(GRID, PX, PY, TILE, math.pi / 2)
    assert ray.side == 1
    assert ray.step_y == 1
    assert ray.map_y == 4
    assert ray.perp_wall_dist == pytest.approx(4 - PY / TILE)


@pytest.mark.parametrize("angle", [i * math.pi / 8 for i in range(16)])
def test_every_ray_ends_on_a_wall(angle):
    ray = cast_ray(GRID, PX, PY, TILE, angle)
    assert GRID[ray.map_y][ray.map_x] == "1"
    assert ray.perp_wall_dist >= MIN_WALL_DISTANCE
    assert ray.side in (0, 1)
    assert ray.dir_x == pytest.approx(math.cos(angle))
    assert ray.dir_y == pytest.approx(math.sin(angle))


def test_distance_is_clamped_against_wall():
    ray = cast_ray(GRID, TILE * 1.0, PY, TILE, math.pi)
    assert ray.perp_wall_dist == MIN_WALL_DISTANCE


def test_leaving_grid_stops_ray():
    grid = ["000", "000", "000"]
    ray = cast_ray(grid, 1.5 * TILE, 1.5 * TILE, TILE, 0.0)
    assert ray.map_x == len(grid[0])
    assert ray.side == 0


def test_diagonal_hits_wall_cell_in_quadrant():
    ray = cast_ray(GRID, PX, PY, TILE, math.pi / 4)
    assert ray.step_x == 1 and ray.step_y == 1
    assert ray.map_x >= 2 and ray.map_y >= 2
    assert ray.angle == math.pi / 4