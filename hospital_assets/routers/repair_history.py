from fastapi import APIRouter, Depends
from sqlmodel import Session

from hospital_assets.db import get_session
from hospital_assets.deps import require_admin
from hospital_assets.schemas import RepairHistoryCreate, RepairHistoryRead
from hospital_assets.services import repair_history

router = APIRouter(prefix="/repair-history", tags=["repair-history"])


@router.post("", response_model=RepairHistoryRead)
def create_repair_history(
        data: RepairHistoryCreate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return repair_history.create_repair_history(session, data)
