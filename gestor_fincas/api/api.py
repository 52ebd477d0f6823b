"""
API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from gestor_fincas.api.endpoints import auth, health, profile

api_router = APIRouter()

# Health and database smoke test
api_router.include_router(health.router)

# Auth (login)
api_router.include_router(auth.router)

# Protected profile
api_router.include_router(profile.router)
