# cctvlog/api/v1/api.py
from fastapi import APIRouter

from cctvlog.api.routes import auth, devices, incidents

api_router = APIRouter()

api_router.include_router(
    devices.router,
    prefix="/devices",
    tags=["devices"],
)
api_router.include_router(
    incidents.router,
    prefix="/incidents",
    tags=["incidents"],
)
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
