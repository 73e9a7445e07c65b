"""Shared Kernel module.

This module contains foundational components that are explicitly shared across
bounded contexts: the per-request tenant context value object and the
observation context used by every domain probe.

Following Domain-Driven Design principles, the Shared Kernel is a small,
carefully managed set of components that contexts agree to depend on. It must
not import from any bounded context.
"""
