"""HTTP API for Wumpus World."""
