"""Domain layer: value objects and pure services."""
