"""Player body and movement systems."""