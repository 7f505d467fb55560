from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from smart_energy.core.deps import get_device_service
from smart_energy.core.exceptions import DeviceNotFoundError
from smart_energy.schemas.device import DeviceResponse, DeviceToggle, DeviceToggleResponse
from smart_energy.services.device_service import DeviceService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[DeviceResponse])
def list_devices(device_service: DeviceService = Depends(get_device_service)):
    """List all devices"""
    return [DeviceResponse.model_validate(d) for d in device_service.get_all_devices()]


@router.get("/active", response_model=List[DeviceResponse])
def list_active_devices(device_service: DeviceService = Depends(get_device_service)):
    """List devices that are currently switched on"""
    return [DeviceResponse.model_validate(d) for d in device_service.get_active_devices()]


@router.get("/{device_id}", response_model=DeviceResponse)
def get_device(device_id: int, device_service: DeviceService = Depends(get_device_service)):
    """Get a single device"""
    try:
        return DeviceResponse.model_validate(device_service.get_device(device_id))
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{device_id}/toggle", response_model=DeviceToggleResponse)
def toggle_device(
    device_id: int,
    toggle: DeviceToggle,
    device_service: DeviceService = Depends(get_device_service)
):
    """Switch a device on or off"""
    try:
        is_on = device_service.toggle_device(device_id, toggle.turn_on)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return DeviceToggleResponse(device_id=device_id, is_on=is_on)
