import pytest

from b3dgame.components import Vec3
from b3dgame.map.systems import (
    GRID_CELL_SIZE,
    GRID_DEPTH,
    GRID_WIDTH,
    WALL_HEIGHT,
    WALL_THICKNESS,
    WALL_WIDTH,
    setup_grid,
    setup_lighting,
    setup_wall,
    spawn_grid,
)


def test_grid_has_one_line_per_row_and_column():
    mesh = spawn_grid(2, 3, 1.0)
    assert len(mesh.lines) == (3 + 1) + (2 + 1)
    assert len(mesh.vertices) == 2 * len(mesh.lines)


def test_grid_indices_are_sequential():
    mesh = spawn_grid(4, 5, 0.5)
    assert mesh.indices == list(range(len(mesh.vertices)))


def test_grid_is_flat_and_within_bounds():
    width, depth, cell = 6, 4, 2.0
    mesh = spawn_grid(width, depth, cell)
    assert all(y == 0.0 for _, y, _ in mesh.vertices)
    assert max(x for x, _, _ in mesh.vertices) == pytest.approx(width * cell / 2)
    assert min(z for _, _, z in mesh.vertices) == pytest.approx(-depth * cell / 2)


def test_grid_rows_span_full_width():
    mesh = spawn_grid(2, 2, 3.0)
    start, end = mesh.lines[0]
    assert start[0] == -end[0]
    assert start[2] == end[2]


def test_setup_grid_uses_arena_size():
    mesh, ground = setup_grid()
    assert len(mesh.lines) == (GRID_WIDTH + 1) + (GRID_DEPTH + 1)
    assert max(x for x, _, _ in mesh.vertices) == pytest.approx(GRID_WIDTH * GRID_CELL_SIZE / 2)
    assert ground.normal == Vec3.Y


def test_light_points_down():
    light = setup_lighting()
    assert light.illuminance == 10000.0
    assert light.shadows_enabled is False
    assert tuple(light.transform.forward()) == pytest.approx((0.0, -1.0, 0.0), abs=1e-9)
    assert light.transform.translation == Vec3(0.0, 10.0, 0.0)


def test_wall_stands_on_ground():
    wall = setup_wall()
    bottom = wall.transform.translation.y - wall.half_extents.y
    assert bottom == pytest.approx(0.0)
    assert wall.size == Vec3(WALL_WIDTH, WALL_HEIGHT, WALL_THICKNESS)