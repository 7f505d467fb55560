from .device import DeviceResponse, DeviceToggle, DeviceToggleResponse
from .energy import EnergyPlanResponse, EnergyLimitUpdate, UsageSummary

__all__ = [
    # Device schemas
    "DeviceResponse", "DeviceToggle", "DeviceToggleResponse",

    # Energy schemas
    "EnergyPlanResponse", "EnergyLimitUpdate", "UsageSummary"
]
