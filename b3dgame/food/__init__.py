"""Food placement on the grid and pickup."""