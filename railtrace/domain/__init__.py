"""Domain layer: ports the core depends on."""
