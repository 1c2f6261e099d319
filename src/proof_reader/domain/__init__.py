"""Domain layer: errors, models and ports with no infrastructure dependencies."""
