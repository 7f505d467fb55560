from sqlalchemy import Column, Integer, String, DateTime, Boolean, Float
from sqlalchemy.sql import func

from smart_energy.core.database import Base


class Device(Base):
    """Device model for smart home devices"""

    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    is_on = Column(Boolean, default=False, nullable=False)
    power_usage_watts = Column(Float, default=0.0, nullable=False)  # Always watts, never kW
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Device(id={self.id}, name={self.name}, is_on={self.is_on}, watts={self.power_usage_watts})>"

    def to_dict(self) -> dict:
        """Convert device to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "is_on": self.is_on,
            "power_usage_watts": self.power_usage_watts,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
