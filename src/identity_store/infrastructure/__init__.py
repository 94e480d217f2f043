"""Infrastructure for the identity store."""
