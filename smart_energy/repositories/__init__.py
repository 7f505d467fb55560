from .device_repository import SqlAlchemyDeviceRepository
from .plan_repository import SqlAlchemyEnergyPlanRepository

__all__ = ["SqlAlchemyDeviceRepository", "SqlAlchemyEnergyPlanRepository"]
