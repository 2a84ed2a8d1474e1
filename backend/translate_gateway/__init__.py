"""Translation gateway package."""
