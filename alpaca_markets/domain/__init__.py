"""Domain layer: models, value objects and error types."""
