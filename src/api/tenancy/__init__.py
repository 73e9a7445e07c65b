"""Tenancy bounded context.

Resolves which team (tenant) an inbound request belongs to from the host it
was addressed to, and owns the Team aggregate that backs that decision.
"""
