"""Domain layer: entities, error taxonomy and the authentication service."""
