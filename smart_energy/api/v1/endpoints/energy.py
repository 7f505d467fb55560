from fastapi import APIRouter, Depends, HTTPException, Response, status
import logging

from smart_energy.core.deps import get_energy_monitor_service
from smart_energy.core.exceptions import InvalidEnergyLimitError
from smart_energy.schemas.energy import EnergyPlanResponse, EnergyLimitUpdate, UsageSummary
from smart_energy.services.energy_monitor_service import EnergyMonitorService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/usage", response_model=UsageSummary)
def get_usage(monitor: EnergyMonitorService = Depends(get_energy_monitor_service)):
    """Current usage compared against the daily limit"""
    return monitor.get_usage_summary()


@router.post("/overload-check", status_code=status.HTTP_204_NO_CONTENT)
def check_overload(monitor: EnergyMonitorService = Depends(get_energy_monitor_service)):
    """Run the overload check; an alert is sent when usage exceeds the limit"""
    monitor.check_for_overload()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/plan", response_model=EnergyPlanResponse)
def get_plan(monitor: EnergyMonitorService = Depends(get_energy_monitor_service)):
    """Get the current energy plan"""
    return EnergyPlanResponse.model_validate(monitor.get_current_plan())


@router.put("/plan/limit", response_model=EnergyPlanResponse)
def update_limit(
    limit_update: EnergyLimitUpdate,
    monitor: EnergyMonitorService = Depends(get_energy_monitor_service)
):
    """Replace the daily limit of the current plan"""
    try:
        plan = monitor.update_energy_limit(limit_update.daily_limit_kwh)
    except InvalidEnergyLimitError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Daily limit set to {plan.daily_limit_kwh} kWh")
    return EnergyPlanResponse.model_validate(plan)
