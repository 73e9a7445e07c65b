"""Tenancy presentation layer.

Organizes presentation concerns by aggregate; each aggregate package
contains its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from tenancy.presentation.teams.routes import admin_router, public_router

router = APIRouter()

router.include_router(public_router)
router.include_router(admin_router)

__all__ = ["router"]
