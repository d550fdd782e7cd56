"""Application layer - read models exposed to callers."""
