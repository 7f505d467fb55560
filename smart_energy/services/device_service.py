from typing import List
import logging

from smart_energy.models.device import Device
from smart_energy.services.interfaces import DeviceRepository
from smart_energy.core.exceptions import DeviceNotFoundError

logger = logging.getLogger(__name__)


class DeviceService:
    """Service layer for device queries and on/off control"""

    def __init__(self, device_repo: DeviceRepository):
        self.device_repo = device_repo

    def toggle_device(self, device_id: int, turn_on: bool) -> bool:
        """Switch a device on or off and persist it. Returns the new state."""
        device = self.device_repo.get_by_id(device_id)
        if device is None:
            logger.warning(f"Toggle requested for unknown device {device_id}")
            raise DeviceNotFoundError(device_id)

        # Always written, even when the state is unchanged
        device.is_on = turn_on
        self.device_repo.update(device)

        logger.info(f"Device {device_id} turned {'on' if turn_on else 'off'}")
        return device.is_on

    def get_active_devices(self) -> List[Device]:
        """Devices currently switched on, in store order"""
        return [device for device in self.device_repo.get_all() if device.is_on]

    def get_all_devices(self) -> List[Device]:
        return list(self.device_repo.get_all())

    def get_device(self, device_id: int) -> Device:
        device = self.device_repo.get_by_id(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device
