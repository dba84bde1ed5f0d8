"""Level geometry: floor grid, wall and lighting."""