from fastapi import APIRouter, Depends
from sqlmodel import Session

from hospital_assets.db import get_session
from hospital_assets.deps import require_admin
from hospital_assets.schemas import AssetReport
from hospital_assets.services.reports import build_asset_report

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/assets", response_model=AssetReport)
def asset_report(
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return build_asset_report(session)
