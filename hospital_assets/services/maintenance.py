import logging
from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from hospital_assets.models import Asset, MaintenanceSchedule, utcnow
from hospital_assets.schemas import (
    MaintenanceScheduleCreate,
    MaintenanceScheduleRead,
    MaintenanceScheduleUpdate,
    MaintenanceStatus,
)
from hospital_assets.services.store import apply_changes, get_or_404, require_reference

logger = logging.getLogger(__name__)


def is_overdue(schedule: MaintenanceSchedule, now: Optional[datetime] = None) -> bool:
    """Read-time view only; the stored status is never promoted to overdue."""
    now = now or utcnow()
    return schedule.status == MaintenanceStatus.scheduled.value and schedule.scheduled_date < now


def create_maintenance_schedule(session: Session, data: MaintenanceScheduleCreate) -> MaintenanceSchedule:
    require_reference(session, Asset, data.asset_id, "Asset")

    schedule = MaintenanceSchedule(
        asset_id=data.asset_id,
        scheduled_date=data.scheduled_date,
        maintenance_type=data.maintenance_type,
        notes=data.notes,
        status=MaintenanceStatus.scheduled.value,
        completed_date=None,
    )
    session.add(schedule)
    session.commit()
    session.refresh(schedule)
    logger.info("maintenance %s scheduled for asset %s", schedule.id, schedule.asset_id)
    return schedule


def update_maintenance_schedule(
    session: Session, schedule_id: int, patch: MaintenanceScheduleUpdate
) -> MaintenanceSchedule:
    # same contract as repair requests: omitted fields kept, completed_date not stamped
    schedule = get_or_404(session, MaintenanceSchedule, schedule_id, "MaintenanceSchedule")
    apply_changes(schedule, patch.changes())
    session.add(schedule)
    session.commit()
    session.refresh(schedule)
    logger.info("maintenance %s updated, status %s", schedule.id, schedule.status)
    return schedule


def list_maintenance_schedules(
    session: Session,
    overdue: Optional[bool] = None,
    now: Optional[datetime] = None,
) -> list[MaintenanceScheduleRead]:
    now = now or utcnow()
    rows = session.exec(select(MaintenanceSchedule).order_by(MaintenanceSchedule.id)).all()

    items = [
        MaintenanceScheduleRead(**row.model_dump(), overdue=is_overdue(row, now))
        for row in rows
    ]
    if overdue is not None:
        items = [item for item in items if item.overdue == overdue]
    return items
