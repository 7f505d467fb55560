from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
import math


class EnergyPlanResponse(BaseModel):
    """Schema for the current energy plan"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    daily_limit_kwh: float
    updated_at: Optional[datetime] = None


class EnergyLimitUpdate(BaseModel):
    """Schema for replacing the daily limit"""
    daily_limit_kwh: float = Field(..., ge=0, description="New daily limit in kilowatt-hours")

    @field_validator("daily_limit_kwh")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Daily limit must be a finite number")
        return v


class UsageSummary(BaseModel):
    """Current usage compared against the plan limit"""
    timestamp: datetime
    current_usage_kwh: float
    daily_limit_kwh: float
    active_devices: int
    is_overloaded: bool
