from smart_energy.models import Device, EnergyPlan
from smart_energy.repositories import SqlAlchemyEnergyPlanRepository
from smart_energy.services.device_service import DeviceService
from smart_energy.services.energy_monitor_service import EnergyMonitorService


def test_device_repo_get_by_id(sql_device_repo, seeded_devices):
    device = sql_device_repo.get_by_id(2)

    assert device is not None
    assert device.name == "TV"
    assert sql_device_repo.get_by_id(99) is None


def test_device_repo_get_all_ordered_by_id(sql_device_repo, seeded_devices):
    assert [d.id for d in sql_device_repo.get_all()] == [1, 2, 3]


def test_device_repo_get_all_empty(sql_device_repo):
    assert sql_device_repo.get_all() == []


def test_device_repo_update_persists_state(db_session, sql_device_repo, seeded_devices):
    device = sql_device_repo.get_by_id(2)
    device.is_on = True

    sql_device_repo.update(device)
    db_session.expire_all()

    assert sql_device_repo.get_by_id(2).is_on is True


def test_device_repo_add_assigns_id(sql_device_repo):
    device = sql_device_repo.add(Device(name="Heater", is_on=False, power_usage_watts=1800))

    assert device.id is not None
    assert sql_device_repo.get_by_id(device.id).power_usage_watts == 1800


def test_plan_repo_creates_default_plan_once(db_session, sql_plan_repo):
    first = sql_plan_repo.get_current_plan()
    second = sql_plan_repo.get_current_plan()

    assert first.daily_limit_kwh == 1.5
    assert first.id == second.id
    assert db_session.query(EnergyPlan).count() == 1


def test_plan_repo_update_plan(db_session, sql_plan_repo):
    plan = sql_plan_repo.get_current_plan()
    plan.daily_limit_kwh = 12.0

    sql_plan_repo.update_plan(plan)
    db_session.expire_all()

    assert sql_plan_repo.get_current_plan().daily_limit_kwh == 12.0
    assert db_session.query(EnergyPlan).count() == 1


def test_plan_repo_returns_existing_plan(db_session):
    db_session.add(EnergyPlan(daily_limit_kwh=3.0, is_current=True))
    db_session.commit()

    plan = SqlAlchemyEnergyPlanRepository(db_session, default_limit_kwh=99.0).get_current_plan()

    assert plan.daily_limit_kwh == 3.0


def test_toggle_round_trip_through_database(db_session, sql_device_repo, seeded_devices):
    service = DeviceService(sql_device_repo)

    assert service.toggle_device(2, True) is True
    db_session.expire_all()

    assert {d.id for d in service.get_active_devices()} == {1, 2, 3}


def test_monitor_against_database(db_session, sql_device_repo, sql_plan_repo, notifier, seeded_devices):
    monitor = EnergyMonitorService(sql_device_repo, sql_plan_repo, notifier)

    assert monitor.calculate_current_usage_kwh() == 0.75

    monitor.update_energy_limit(0.5)
    db_session.expire_all()
    assert sql_plan_repo.get_current_plan().daily_limit_kwh == 0.5

    monitor.check_for_overload()
    notifier.send_alert.assert_called_once()
