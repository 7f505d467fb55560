from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class DeviceResponse(BaseModel):
    """Schema for device response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    is_on: bool
    power_usage_watts: float = Field(..., ge=0, description="Power draw in watts")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeviceToggle(BaseModel):
    """Schema for switching a device on or off"""
    turn_on: bool


class DeviceToggleResponse(BaseModel):
    """Schema for the result of a toggle"""
    device_id: int
    is_on: bool
