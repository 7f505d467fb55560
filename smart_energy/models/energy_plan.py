from sqlalchemy import Column, Integer, DateTime, Boolean, Float
from sqlalchemy.sql import func

from smart_energy.core.database import Base


class EnergyPlan(Base):
    """Energy plan holding the daily usage limit"""

    __tablename__ = "energy_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    daily_limit_kwh = Column(Float, nullable=False, default=0.0)
    is_current = Column(Boolean, default=True, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<EnergyPlan(id={self.id}, daily_limit_kwh={self.daily_limit_kwh})>"

    def to_dict(self) -> dict:
        """Convert plan to dictionary"""
        return {
            "id": self.id,
            "daily_limit_kwh": self.daily_limit_kwh,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
