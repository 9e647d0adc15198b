"""Core utilities: randomness, dice, scheduling and shared types."""
