"""Error types raised by the energy services."""


class SmartEnergyError(Exception):
    """Base class for smart energy errors"""


class DeviceNotFoundError(SmartEnergyError, ValueError):
    """Raised when a device id does not exist in the device store"""

    def __init__(self, device_id: int):
        self.device_id = device_id
        super().__init__(f"Device with id {device_id} not found")


class InvalidEnergyLimitError(SmartEnergyError, ValueError):
    """Raised when a daily limit is negative or not a finite number"""

    def __init__(self, limit: float):
        self.limit = limit
        super().__init__(f"Daily limit must be a finite, non-negative number of kWh, got {limit}")
