"""Infrastructure layer - registries, singleton lifecycle and logging."""
