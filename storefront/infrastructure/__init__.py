"""Infrastructure layer - persistence, logging and event delivery."""
