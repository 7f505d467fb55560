"""Collaborator interfaces the energy services depend on.

Services receive implementations through their constructors: the SQLAlchemy
repositories and notifiers in production, mocks in tests.
"""
from typing import List, Optional, Protocol

from smart_energy.models.device import Device
from smart_energy.models.energy_plan import EnergyPlan


class DeviceRepository(Protocol):
    """Storage for devices"""

    def get_by_id(self, device_id: int) -> Optional[Device]:
        ...

    def get_all(self) -> List[Device]:
        ...

    def update(self, device: Device) -> None:
        """Overwrite the stored device with the same id"""
        ...


class EnergyPlanRepository(Protocol):
    """Storage for the single current energy plan"""

    def get_current_plan(self) -> EnergyPlan:
        ...

    def update_plan(self, plan: EnergyPlan) -> None:
        ...


class NotificationService(Protocol):
    """Alert delivery; fire-and-forget from the caller's side"""

    def send_alert(self, message: str) -> None:
        ...
