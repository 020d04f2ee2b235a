from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlmodel import Session

from hospital_assets.db import get_session
from hospital_assets.deps import require_admin, require_user
from hospital_assets.schemas import (
    AssetCreate,
    AssetRead,
    AssetUpdate,
    DeleteResult,
    RepairHistoryRead,
)
from hospital_assets.services import assets, repair_history
from hospital_assets.services.export import build_assets_workbook

router = APIRouter(prefix="/assets", tags=["assets"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _select_assets(session: Session, department: Optional[str]):
    if department is not None:
        return assets.list_assets_by_department(session, department)
    return assets.list_all_assets(session)


@router.post("", response_model=AssetRead)
def create_asset(
        data: AssetCreate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return assets.create_asset(session, data)


@router.get("", response_model=list[AssetRead])
def list_assets(
        department: Optional[str] = Query(None, description="Exact department name"),
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return _select_assets(session, department)


@router.get("/export.xlsx")
def export_assets_xlsx(
        department: Optional[str] = Query(None, description="Exact department name"),
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    xlsx_bytes = build_assets_workbook(_select_assets(session, department))

    filename = f"assets-{department}.xlsx" if department else "assets.xlsx"
    headers = {
        "Content-Disposition": f"attachment; filename=\"assets.xlsx\"; filename*=UTF-8''{quote(filename)}"
    }
    return Response(content=xlsx_bytes, media_type=XLSX_MEDIA_TYPE, headers=headers)


@router.get("/{asset_id}", response_model=AssetRead)
def get_asset(
        asset_id: int,
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return assets.get_asset(session, asset_id)


@router.patch("/{asset_id}", response_model=AssetRead)
def update_asset(
        asset_id: int,
        body: AssetUpdate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return assets.update_asset(session, asset_id, body)


@router.delete("/{asset_id}", response_model=DeleteResult)
def delete_asset(
        asset_id: int,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return {"success": assets.delete_asset(session, asset_id)}


@router.get("/{asset_id}/repair-history", response_model=list[RepairHistoryRead])
def list_asset_repair_history(
        asset_id: int,
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return repair_history.list_repair_history_by_asset(session, asset_id)
