"""Domain layer: errors, models, identifiers, data-service contract, services."""
