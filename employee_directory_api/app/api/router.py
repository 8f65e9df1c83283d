"""
Top‑level API router.

Aggregates domain‑specific routers under a unified prefix.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
