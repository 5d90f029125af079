"""Canvas protocols and stroke styling."""
