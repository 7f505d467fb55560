from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import Optional
import logging

from smart_energy.models.energy_plan import EnergyPlan
from smart_energy.core.config import settings

logger = logging.getLogger(__name__)


class SqlAlchemyEnergyPlanRepository:
    """Storage for the single current energy plan.

    The first read creates the plan with the configured default limit when the
    table holds none, so there is always exactly one current plan.
    """

    def __init__(self, db: Session, default_limit_kwh: Optional[float] = None):
        self.db = db
        self.default_limit_kwh = (
            settings.DEFAULT_DAILY_LIMIT_KWH if default_limit_kwh is None else default_limit_kwh
        )

    def get_current_plan(self) -> EnergyPlan:
        stmt = select(EnergyPlan).where(EnergyPlan.is_current).order_by(EnergyPlan.id).limit(1)
        plan = self.db.execute(stmt).scalar_one_or_none()
        if plan is not None:
            return plan

        try:
            plan = EnergyPlan(daily_limit_kwh=self.default_limit_kwh, is_current=True)
            self.db.add(plan)
            self.db.commit()
            self.db.refresh(plan)
            logger.info(f"Created current energy plan with limit {plan.daily_limit_kwh} kWh")
            return plan
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create current energy plan: {e}")
            raise

    def update_plan(self, plan: EnergyPlan) -> None:
        """Overwrite the current plan"""
        try:
            plan.is_current = True
            self.db.merge(plan)
            self.db.commit()
            logger.debug(f"Energy plan {plan.id} saved (daily_limit_kwh={plan.daily_limit_kwh})")
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update energy plan: {e}")
            raise
