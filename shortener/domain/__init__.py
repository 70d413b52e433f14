"""Domain layer: value objects, entities and domain exceptions."""
