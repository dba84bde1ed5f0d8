"""The arena: a line grid on the ground, lighting and a wall."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from ..components import Ground, Quat, Transform, Vec3, Wall

GRID_COLOR = (1.0, 1.0, 1.0)
GRID_EMIT_COLOR = (0.5, 0.5, 0.5)
GRID_WIDTH = 100
GRID_DEPTH = 100
GRID_CELL_SIZE = 2.0

WALL_HEIGHT = 10.0
WALL_WIDTH = 40.0
WALL_THICKNESS = 1.0


@dataclass
class GridMesh:
    """A line-list mesh: each consecutive pair of indices is one line."""

    vertices: List[Tuple[float, float, float]] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @property
    def lines(self) -> List[Tuple[Tuple[float, float, float], Tuple[float, float, float]]]:
        return [
            (self.vertices[a], self.vertices[b])
            for a, b in zip(self.indices[::2], self.indices[1::2])
        ]


@dataclass
class DirectionalLight:
    illuminance: float
    shadows_enabled: bool
    transform: Transform


def _quat_from_axes(x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> Quat:
    m00, m01, m02 = x_axis
    m10, m11, m12 = y_axis
    m20, m21, m22 = z_axis
    if m22 <= 0.0:
        dif10 = m11 - m00
        omm22 = 1.0 - m22
        if dif10 <= 0.0:
            four_sq = omm22 - dif10
            inv = 0.5 / math.sqrt(four_sq)
            return Quat(four_sq * inv, (m01 + m10) * inv, (m02 + m20) * inv, (m12 - m21) * inv)
        four_sq = omm22 + dif10
        inv = 0.5 / math.sqrt(four_sq)
        return Quat((m01 + m10) * inv, four_sq * inv, (m12 + m21) * inv, (m20 - m02) * inv)
    sum10 = m11 + m00
    opm22 = 1.0 + m22
    if sum10 <= 0.0:
        four_sq = opm22 - sum10
        inv = 0.5 / math.sqrt(four_sq)
        return Quat((m02 + m20) * inv, (m12 + m21) * inv, four_sq * inv, (m01 - m10) * inv)
    four_sq = opm22 + sum10
    inv = 0.5 / math.sqrt(four_sq)
    return Quat((m12 - m21) * inv, (m20 - m02) * inv, (m01 - m10) * inv, four_sq * inv)


def _looking_at(eye: Vec3, target: Vec3, up: Vec3) -> Transform:
    back = (eye - target).normalize()
    right = up.cross(back).normalize()
    true_up = back.cross(right)
    return Transform(eye, _quat_from_axes(right, true_up, back))


def spawn_grid(width: int, depth: int, cell_size: float) -> GridMesh:
    """Build a flat grid of lines centred on the origin."""
    half_width = width * cell_size / 2.0
    half_depth = depth * cell_size / 2.0
    mesh = GridMesh()

    def add_line(start: Tuple[float, float, float], end: Tuple[float, float, float]) -> None:
        first = len(mesh.vertices)
        mesh.vertices.extend((start, end))
        mesh.indices.extend((first, first + 1))

    for i in range(depth + 1):
        z = -half_depth + i * cell_size
        add_line((-half_width, 0.0, z), (half_width, 0.0, z))

    for i in range(width + 1):
        x = -half_width + i * cell_size
        add_line((x, 0.0, -half_depth), (x, 0.0, half_depth))

    return mesh


def setup_lighting() -> DirectionalLight:
    return DirectionalLight(
        illuminance=10000.0,
        shadows_enabled=False,
        transform=_looking_at(Vec3(0.0, 10.0, 0.0), Vec3.ZERO, Vec3.Z),
    )


def setup_grid() -> Tuple[GridMesh, Ground]:
    return spawn_grid(GRID_WIDTH, GRID_DEPTH, GRID_CELL_SIZE), Ground(Transform(), Vec3.Y)


def setup_wall() -> Wall:
    return Wall(
        Transform(Vec3(10.0, WALL_HEIGHT / 2.0, 10.0)),
        Vec3(WALL_WIDTH, WALL_HEIGHT, WALL_THICKNESS),
    )