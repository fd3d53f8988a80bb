"""Identity bounded context - Infrastructure layer."""
