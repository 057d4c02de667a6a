"""Default documents written into a fresh workspace (loaded as package data)."""
