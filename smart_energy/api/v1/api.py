from fastapi import APIRouter

from smart_energy.api.v1.endpoints import devices, energy

api_router = APIRouter()

# Include device endpoints
api_router.include_router(devices.router, prefix="/devices", tags=["devices"])

# Include energy monitoring endpoints
api_router.include_router(energy.router, prefix="/energy", tags=["energy"])
