#!/usr/bin/env python3
"""
Device Seeding Script for Smart Home Energy

Creates the database tables and inserts a household of devices with realistic
power draw, plus the current energy plan. Devices that already exist (by name)
are left untouched, so the script can be run repeatedly.
"""

import argparse
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from smart_energy.core.config import settings
from smart_energy.core.database import SessionLocal, init_db
from smart_energy.models.device import Device
from smart_energy.repositories import SqlAlchemyDeviceRepository, SqlAlchemyEnergyPlanRepository

logger = logging.getLogger(__name__)

# Household devices with typical power draw in watts
DEVICE_CONFIGS: List[Dict[str, Any]] = [
    {"name": "Kitchen Refrigerator", "power_usage_watts": 150, "is_on": True},
    {"name": "Living Room AC", "power_usage_watts": 2000, "is_on": False},
    {"name": "Washing Machine", "power_usage_watts": 500, "is_on": False},
    {"name": "Living Room TV", "power_usage_watts": 120, "is_on": False},
    {"name": "Bedroom Lights", "power_usage_watts": 60, "is_on": False},
]


def seed_devices(
    db: Session,
    device_configs: Optional[List[Dict[str, Any]]] = None,
    daily_limit_kwh: Optional[float] = None
) -> Dict[str, int]:
    """Insert missing devices and make sure a current plan exists"""
    device_configs = DEVICE_CONFIGS if device_configs is None else device_configs
    device_repo = SqlAlchemyDeviceRepository(db)

    existing_names = set(db.execute(select(Device.name)).scalars().all())
    created = 0
    skipped = 0

    for config in device_configs:
        if config["name"] in existing_names:
            skipped += 1
            continue

        if config["power_usage_watts"] < 0:
            raise ValueError(f"Power draw cannot be negative for {config['name']}")

        device_repo.add(Device(
            name=config["name"],
            power_usage_watts=float(config["power_usage_watts"]),
            is_on=bool(config.get("is_on", False))
        ))
        existing_names.add(config["name"])
        created += 1

    plan = SqlAlchemyEnergyPlanRepository(db, default_limit_kwh=daily_limit_kwh).get_current_plan()

    logger.info(f"Seeding completed: {created} created, {skipped} skipped, "
                f"daily limit {plan.daily_limit_kwh} kWh")
    return {"created": created, "skipped": skipped, "total": len(device_configs)}


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description="Smart Home Energy device seeder")
    parser.add_argument("--daily-limit", type=float, default=settings.DEFAULT_DAILY_LIMIT_KWH,
                        help="Daily limit (kWh) for a newly created plan")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    init_db()
    db = SessionLocal()
    try:
        seed_devices(db, daily_limit_kwh=args.daily_limit)
    finally:
        db.close()


if __name__ == "__main__":
    main()
