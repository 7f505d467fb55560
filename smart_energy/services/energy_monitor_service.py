from datetime import datetime, timezone
from typing import Iterable
import math

from smart_energy.models.device import Device
from smart_energy.models.energy_plan import EnergyPlan
from smart_energy.schemas.energy import UsageSummary
from smart_energy.services.interfaces import (
    DeviceRepository, EnergyPlanRepository, NotificationService
)
from smart_energy.core.exceptions import InvalidEnergyLimitError
from smart_energy.core.logging import get_logger

logger = get_logger(__name__)

WATTS_PER_KILOWATT = 1000.0


def _usage_kwh(devices: Iterable[Device]) -> float:
    total_watts = sum(device.power_usage_watts for device in devices if device.is_on)
    return total_watts / WATTS_PER_KILOWATT


class EnergyMonitorService:
    """Service layer for usage aggregation, overload alerts and plan limits.

    Device state is read straight from the device repository rather than
    through DeviceService. Nothing is cached; each call recomputes from the
    repositories.
    """

    def __init__(
        self,
        device_repo: DeviceRepository,
        plan_repo: EnergyPlanRepository,
        notifier: NotificationService,
    ):
        self.device_repo = device_repo
        self.plan_repo = plan_repo
        self.notifier = notifier

    def calculate_current_usage_kwh(self) -> float:
        """Sum the draw of switched-on devices, in kWh. 0.0 when nothing is on."""
        return _usage_kwh(self.device_repo.get_all())

    def check_for_overload(self) -> None:
        """Send one alert when usage is strictly above the plan's daily limit.

        Usage equal to the limit is not an overload.
        """
        usage = self.calculate_current_usage_kwh()
        plan = self.plan_repo.get_current_plan()

        if usage > plan.daily_limit_kwh:
            logger.warning(
                "Energy overload detected",
                usage_kwh=usage,
                limit_kwh=plan.daily_limit_kwh,
            )
            self.notifier.send_alert(
                f"Energy usage {usage:.3f} kWh exceeds daily limit of "
                f"{plan.daily_limit_kwh:.3f} kWh"
            )
        else:
            logger.debug("Energy usage within limit", usage_kwh=usage, limit_kwh=plan.daily_limit_kwh)

    def update_energy_limit(self, new_limit: float) -> EnergyPlan:
        """Replace the current plan's daily limit and persist the plan.

        Negative, NaN and infinite limits raise InvalidEnergyLimitError before
        the plan is read. Zero is accepted.
        """
        if new_limit is None or math.isnan(new_limit) or math.isinf(new_limit) or new_limit < 0:
            raise InvalidEnergyLimitError(new_limit)

        plan = self.plan_repo.get_current_plan()
        previous_limit = plan.daily_limit_kwh
        plan.daily_limit_kwh = new_limit
        self.plan_repo.update_plan(plan)

        logger.info("Daily energy limit updated", previous_kwh=previous_limit, new_kwh=new_limit)
        return plan

    def get_current_plan(self) -> EnergyPlan:
        return self.plan_repo.get_current_plan()

    def get_usage_summary(self) -> UsageSummary:
        """Usage and limit from a single read of each repository. Sends no alert."""
        devices = list(self.device_repo.get_all())
        usage = _usage_kwh(devices)
        plan = self.plan_repo.get_current_plan()

        return UsageSummary(
            timestamp=datetime.now(timezone.utc),
            current_usage_kwh=usage,
            daily_limit_kwh=plan.daily_limit_kwh,
            active_devices=sum(1 for device in devices if device.is_on),
            is_overloaded=usage > plan.daily_limit_kwh,
        )
