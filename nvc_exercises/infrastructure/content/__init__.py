"""Content bounded context - Infrastructure layer."""
