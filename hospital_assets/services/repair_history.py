import logging

from sqlmodel import Session, select

from hospital_assets.models import Asset, RepairHistory
from hospital_assets.schemas import RepairHistoryCreate
from hospital_assets.services.store import require_reference

logger = logging.getLogger(__name__)


# append-only: no update or delete
def create_repair_history(session: Session, data: RepairHistoryCreate) -> RepairHistory:
    require_reference(session, Asset, data.asset_id, "Asset")

    entry = RepairHistory(**data.model_dump())
    session.add(entry)
    session.commit()
    session.refresh(entry)
    logger.info("repair history %s recorded for asset %s", entry.id, entry.asset_id)
    return entry


def list_repair_history_by_asset(session: Session, asset_id: int) -> list[RepairHistory]:
    stmt = (
        select(RepairHistory)
        .where(RepairHistory.asset_id == asset_id)
        .order_by(RepairHistory.repair_date, RepairHistory.id)
    )
    return list(session.exec(stmt).all())
