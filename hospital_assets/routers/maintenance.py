from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from hospital_assets.db import get_session
from hospital_assets.deps import require_admin, require_user
from hospital_assets.schemas import (
    MaintenanceScheduleCreate,
    MaintenanceScheduleRead,
    MaintenanceScheduleUpdate,
)
from hospital_assets.services import maintenance

router = APIRouter(prefix="/maintenance-schedules", tags=["maintenance"])


@router.post("", response_model=MaintenanceScheduleRead)
def create_maintenance_schedule(
        data: MaintenanceScheduleCreate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    schedule = maintenance.create_maintenance_schedule(session, data)
    return MaintenanceScheduleRead(**schedule.model_dump(), overdue=maintenance.is_overdue(schedule))


@router.get("", response_model=list[MaintenanceScheduleRead])
def list_maintenance_schedules(
        overdue: Optional[bool] = Query(None, description="Only overdue (true) or only not overdue (false)"),
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return maintenance.list_maintenance_schedules(session, overdue=overdue)


@router.patch("/{schedule_id}", response_model=MaintenanceScheduleRead)
def update_maintenance_schedule(
        schedule_id: int,
        body: MaintenanceScheduleUpdate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    schedule = maintenance.update_maintenance_schedule(session, schedule_id, body)
    return MaintenanceScheduleRead(**schedule.model_dump(), overdue=maintenance.is_overdue(schedule))
