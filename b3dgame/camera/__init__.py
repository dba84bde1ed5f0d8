"""First-person camera: following the player, tilt and screen shake."""