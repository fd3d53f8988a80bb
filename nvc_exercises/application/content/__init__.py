"""Content bounded context - Application layer."""
