import logging

from sqlmodel import Session, select

from hospital_assets.models import Asset, User, utcnow
from hospital_assets.schemas import AssetCreate, AssetUpdate
from hospital_assets.services.store import (
    apply_changes,
    commit_unique,
    get_or_404,
    require_reference,
)

logger = logging.getLogger(__name__)


def create_asset(session: Session, data: AssetCreate) -> Asset:
    if data.assigned_user_id is not None:
        require_reference(session, User, data.assigned_user_id, "User")

    # status is stored as given, not forced to active
    asset = Asset(**data.model_dump())
    commit_unique(session, asset, "Asset", "serial_number")
    logger.info("created asset %s (serial %s)", asset.id, asset.serial_number)
    return asset


def update_asset(session: Session, asset_id: int, patch: AssetUpdate) -> Asset:
    """
    Apply the fields present in ``patch``; ``assigned_user_id=None`` unassigns.

    The assigned user is not re-validated here, only on create.
    updated_at moves forward even for an empty patch.
    """
    asset = get_or_404(session, Asset, asset_id, "Asset")
    apply_changes(asset, patch.changes())
    asset.updated_at = utcnow()
    commit_unique(session, asset, "Asset", "serial_number")
    logger.info("updated asset %s", asset.id)
    return asset


def delete_asset(session: Session, asset_id: int) -> bool:
    # no cascade: schedules, history and requests keep their asset_id
    asset = session.get(Asset, asset_id)
    if asset is None:
        return False
    session.delete(asset)
    session.commit()
    logger.info("deleted asset %s", asset_id)
    return True


def get_asset(session: Session, asset_id: int) -> Asset:
    return get_or_404(session, Asset, asset_id, "Asset")


def list_all_assets(session: Session) -> list[Asset]:
    return list(session.exec(select(Asset).order_by(Asset.id)).all())


def list_assets_by_department(session: Session, department: str) -> list[Asset]:
    stmt = select(Asset).where(Asset.department == department).order_by(Asset.id)
    return list(session.exec(stmt).all())


def list_assets_assigned_to_user(session: Session, user_id: int) -> list[Asset]:
    stmt = select(Asset).where(Asset.assigned_user_id == user_id).order_by(Asset.id)
    return list(session.exec(stmt).all())
