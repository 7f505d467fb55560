from .device_service import DeviceService
from .energy_monitor_service import EnergyMonitorService
from .notification_service import LoggingNotificationService, RedisNotificationService

__all__ = [
    "DeviceService", "EnergyMonitorService",
    "LoggingNotificationService", "RedisNotificationService"
]
