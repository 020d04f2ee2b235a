"""
Repair request workflow.

    pending -> in_progress -> completed | rejected
    pending -> completed | rejected

Requests are created ``pending``; only ``update_repair_request`` changes the
status, and it does not police the transition (any status may follow any
other). Marking a request completed does not stamp ``completed_date``; the
caller sends it alongside the status when it wants one recorded.
"""
import logging

from sqlmodel import Session, select

from hospital_assets.models import Asset, RepairRequest, User, utcnow
from hospital_assets.schemas import RepairRequestCreate, RepairRequestStatus, RepairRequestUpdate
from hospital_assets.services.store import apply_changes, get_or_404, require_reference

logger = logging.getLogger(__name__)


def create_repair_request(session: Session, data: RepairRequestCreate) -> RepairRequest:
    require_reference(session, Asset, data.asset_id, "Asset")
    require_reference(session, User, data.requested_by_user_id, "User")

    now = utcnow()
    request = RepairRequest(
        asset_id=data.asset_id,
        requested_by_user_id=data.requested_by_user_id,
        description=data.description,
        priority=data.priority,
        status=RepairRequestStatus.pending.value,
        requested_date=now,
        completed_date=None,
        admin_notes=None,
        created_at=now,
    )
    session.add(request)
    session.commit()
    session.refresh(request)
    logger.info("repair request %s opened for asset %s", request.id, request.asset_id)
    return request


def update_repair_request(session: Session, request_id: int, patch: RepairRequestUpdate) -> RepairRequest:
    request = get_or_404(session, RepairRequest, request_id, "RepairRequest")
    old_status = request.status

    apply_changes(request, patch.changes())

    session.add(request)
    session.commit()
    session.refresh(request)
    logger.info("repair request %s: %s -> %s", request.id, old_status, request.status)
    return request


def list_all_repair_requests(session: Session) -> list[RepairRequest]:
    stmt = select(RepairRequest).order_by(RepairRequest.created_at.desc(), RepairRequest.id.desc())
    return list(session.exec(stmt).all())


def list_repair_requests_by_user(session: Session, user_id: int) -> list[RepairRequest]:
    stmt = (
        select(RepairRequest)
        .where(RepairRequest.requested_by_user_id == user_id)
        .order_by(RepairRequest.id)
    )
    return list(session.exec(stmt).all())
