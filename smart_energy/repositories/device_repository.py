from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List, Optional
import logging

from smart_energy.models.device import Device

logger = logging.getLogger(__name__)


class SqlAlchemyDeviceRepository:
    """Device storage backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, device_id: int) -> Optional[Device]:
        return self.db.get(Device, device_id)

    def get_all(self) -> List[Device]:
        stmt = select(Device).order_by(Device.id)
        result = self.db.execute(stmt)
        return list(result.scalars().all())

    def update(self, device: Device) -> None:
        """Overwrite the stored device with the same id"""
        try:
            self.db.merge(device)
            self.db.commit()
            logger.debug(f"Device {device.id} saved (is_on={device.is_on})")
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update device {device.id}: {e}")
            raise

    def add(self, device: Device) -> Device:
        """Insert a new device"""
        try:
            self.db.add(device)
            self.db.commit()
            self.db.refresh(device)
            return device
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to add device {device.name}: {e}")
            raise
