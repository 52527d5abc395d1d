"""Small helpers shared across grouplist."""
