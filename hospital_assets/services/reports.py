from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from hospital_assets.models import Asset, MaintenanceSchedule, RepairRequest, utcnow
from hospital_assets.schemas import AssetReport, MaintenanceStatus, RepairRequestStatus


def _count_assets_by(session: Session, column) -> dict[str, int]:
    # keys are the raw stored values, no case folding or trimming
    rows = session.exec(select(column, func.count()).group_by(column)).all()
    return {key: count for key, count in rows}


def build_asset_report(session: Session, now: Optional[datetime] = None) -> AssetReport:
    """
    Aggregate counts over the current rows. Nothing is cached or kept up to
    date at write time; every call queries the tables again.

    ``maintenance_due`` counts scheduled rows whose date is at or before now.
    """
    now = now or utcnow()

    total_assets = session.exec(select(func.count()).select_from(Asset)).one()

    maintenance_due = session.exec(
        select(func.count())
        .select_from(MaintenanceSchedule)
        .where(MaintenanceSchedule.status == MaintenanceStatus.scheduled.value)
        .where(MaintenanceSchedule.scheduled_date <= now)
    ).one()

    repair_requests_pending = session.exec(
        select(func.count())
        .select_from(RepairRequest)
        .where(RepairRequest.status == RepairRequestStatus.pending.value)
    ).one()

    return AssetReport(
        total_assets=total_assets,
        assets_by_status=_count_assets_by(session, Asset.status),
        assets_by_department=_count_assets_by(session, Asset.department),
        assets_by_type=_count_assets_by(session, Asset.type),
        maintenance_due=maintenance_due,
        repair_requests_pending=repair_requests_pending,
    )
