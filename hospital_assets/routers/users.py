from fastapi import APIRouter, Depends
from sqlmodel import Session

from hospital_assets.db import get_session
from hospital_assets.deps import require_admin, require_user
from hospital_assets.schemas import (
    AssetRead,
    DeleteResult,
    RepairRequestRead,
    UserCreate,
    UserRead,
    UserUpdate,
)
from hospital_assets.services import assets, repair_requests, users

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead)
def create_user(
        data: UserCreate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return users.create_user(session, data)


@router.get("", response_model=list[UserRead])
def list_users(
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return users.list_users(session)


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
        user_id: int,
        body: UserUpdate,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return users.update_user(session, user_id, body)


@router.delete("/{user_id}", response_model=DeleteResult)
def delete_user(
        user_id: int,
        session: Session = Depends(get_session),
        _role=Depends(require_admin),
):
    return {"success": users.delete_user(session, user_id)}


@router.get("/{user_id}/assets", response_model=list[AssetRead])
def list_user_assets(
        user_id: int,
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return assets.list_assets_assigned_to_user(session, user_id)


@router.get("/{user_id}/repair-requests", response_model=list[RepairRequestRead])
def list_user_repair_requests(
        user_id: int,
        session: Session = Depends(get_session),
        _role=Depends(require_user),
):
    return repair_requests.list_repair_requests_by_user(session, user_id)
