"""Identity bounded context - Application layer."""
