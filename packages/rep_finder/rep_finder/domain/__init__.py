"""Domain layer: entities, interfaces and exceptions."""
