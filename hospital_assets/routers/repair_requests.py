from fastapi import APIRouter, Depends
from sqlmodel import Session

from hospital_assets.db import get_session
from hospital_assets.deps import require_admin, require_user
from hospital_assets.schemas import RepairRequestCreate, RepairRequestRead, RepairRequestUpdate
from hospital_assets.services import repair_requests

router = APIRouter(prefix="/repair-requests", tags=["repair-requests"])


@router.post("", response_model=RepairRequestRead)
def create_repair_request(
        data: RepairRequestCreate,
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return repair_requests.create_repair_request(session, data)


@router.get("", response_model=list[RepairRequestRead])
def list_repair_requests(
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return repair_requests.list_all_repair_requests(session)


@router.patch("/{request_id}", response_model=RepairRequestRead)
def update_repair_request(
        request_id: int,
        body: RepairRequestUpdate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return repair_requests.update_repair_request(session, request_id, body)
