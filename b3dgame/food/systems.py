"""Spawning food on the grid and eating it."""

from __future__ import annotations

import random
from typing import List, Optional

from ..components import Food, Transform, Vec3
from ..map.systems import GRID_CELL_SIZE, GRID_DEPTH, GRID_WIDTH

FOOD_COLOR = (0.9, 0.3, 0.3)
FOOD_HEIGHT = 0.5


def spawn_food(player_transform: Transform, rng: Optional[random.Random] = None) -> Food:
    """Place a new piece of food on a random grid cell."""
    rng = rng if rng is not None else random.Random()
    avoid = (player_transform.translation.x, player_transform.translation.y)
    while True:
        cell = (
            float(rng.randrange(-(GRID_WIDTH // 2), GRID_WIDTH // 2)),
            float(rng.randrange(-(GRID_DEPTH // 2), GRID_DEPTH // 2)),
        )
        if cell != avoid:
            break

    x, z = cell
    return Food(Transform(Vec3(x * GRID_CELL_SIZE, FOOD_HEIGHT, z * GRID_CELL_SIZE)))


def food_consumed(
    player_transform: Transform,
    foods: List[Food],
    rng: Optional[random.Random] = None,
) -> Optional[Food]:
    """Eat the first food within reach, replacing it in ``foods``; return the replacement."""
    for food in foods:
        distance = player_transform.translation.distance(food.transform.translation)
        if distance < GRID_CELL_SIZE / 2.0:
            foods.remove(food)
            replacement = spawn_food(player_transform, rng)
            foods.append(replacement)
            return replacement
    return None