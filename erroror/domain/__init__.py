"""Domain layer: protocols the core depends on."""
