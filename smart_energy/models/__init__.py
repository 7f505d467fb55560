from .device import Device
from .energy_plan import EnergyPlan

__all__ = ["Device", "EnergyPlan"]
