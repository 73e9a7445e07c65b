"""Application layer for the tenancy bounded context."""
