"""Infrastructure layer for the tenancy bounded context."""
