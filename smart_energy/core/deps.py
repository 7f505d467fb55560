from fastapi import Depends
from sqlalchemy.orm import Session
import logging

from smart_energy.core.config import settings
from smart_energy.core.database import get_db
from smart_energy.core.redis_client import get_redis
from smart_energy.repositories import SqlAlchemyDeviceRepository, SqlAlchemyEnergyPlanRepository
from smart_energy.services.device_service import DeviceService
from smart_energy.services.energy_monitor_service import EnergyMonitorService
from smart_energy.services.interfaces import NotificationService
from smart_energy.services.notification_service import (
    LoggingNotificationService, RedisNotificationService
)

logger = logging.getLogger(__name__)


def get_notifier() -> NotificationService:
    """Notifier selected by NOTIFIER_BACKEND"""
    if settings.NOTIFIER_BACKEND == "redis":
        return RedisNotificationService(get_redis())
    if settings.NOTIFIER_BACKEND != "log":
        logger.warning(f"Unknown NOTIFIER_BACKEND '{settings.NOTIFIER_BACKEND}', falling back to log")
    return LoggingNotificationService()


def get_device_service(db: Session = Depends(get_db)) -> DeviceService:
    """Dependency to get device service"""
    return DeviceService(SqlAlchemyDeviceRepository(db))


def get_energy_monitor_service(
    db: Session = Depends(get_db),
    notifier: NotificationService = Depends(get_notifier)
) -> EnergyMonitorService:
    """Dependency to get energy monitor service"""
    return EnergyMonitorService(
        SqlAlchemyDeviceRepository(db),
        SqlAlchemyEnergyPlanRepository(db),
        notifier
    )
