from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, ClassVar, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, model_validator


def _as_utc_naive(dt: datetime) -> datetime:
    # aware input -> UTC -> drop tzinfo; naive input is taken as UTC already
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc_naive)]


class UserRole(str, Enum):
    admin = "admin"
    regular = "regular"


class AssetType(str, Enum):
    medical_equipment = "medical_equipment"
    furniture = "furniture"
    it_device = "it_device"
    vehicle = "vehicle"


class AssetStatus(str, Enum):
    active = "active"
    damaged = "damaged"
    under_repair = "under_repair"
    inactive = "inactive"


class RepairRequestStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    rejected = "rejected"


class MaintenanceStatus(str, Enum):
    scheduled = "scheduled"
    completed = "completed"
    overdue = "overdue"


class _Input(BaseModel):
    # enums land in the tables as their plain string values
    model_config = ConfigDict(use_enum_values=True)


class _Patch(_Input):
    """
    Sparse update body.

    Only the keys the client actually sent are applied: an omitted key leaves
    the column alone, an explicit ``null`` writes NULL. Columns that are NOT
    NULL are listed in ``_not_nullable`` and reject an explicit ``null``.
    """

    _not_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self._not_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# --- users ---

class UserCreate(_Input):
    username: str = Field(..., min_length=3)
    email: EmailStr
    role: UserRole
    department: str = Field(..., min_length=1)


class UserUpdate(_Patch):
    _not_nullable: ClassVar[tuple[str, ...]] = ("username", "email", "role", "department")

    username: Optional[str] = Field(None, min_length=3)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    department: Optional[str] = Field(None, min_length=1)


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    role: UserRole
    department: str
    created_at: datetime


# --- assets ---

class AssetCreate(_Input):
    name: str = Field(..., min_length=1)
    type: AssetType
    department: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    serial_number: str = Field(..., min_length=1)
    purchase_date: UTCDateTime
    status: AssetStatus
    assigned_user_id: Optional[int] = None


class AssetUpdate(_Patch):
    _not_nullable: ClassVar[tuple[str, ...]] = (
        "name", "type", "department", "location",
        "serial_number", "purchase_date", "status",
    )

    name: Optional[str] = Field(None, min_length=1)
    type: Optional[AssetType] = None
    department: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    serial_number: Optional[str] = Field(None, min_length=1)
    purchase_date: Optional[UTCDateTime] = None
    status: Optional[AssetStatus] = None
    # null here means "unassign"
    assigned_user_id: Optional[int] = None

    model_config = {
        "use_enum_values": True,
        "json_schema_extra": {
            "examples": [
                {"status": "under_repair"},
                {"location": "Bay 4", "assigned_user_id": None},
            ]
        },
    }


class AssetRead(BaseModel):
    id: int
    name: str
    type: AssetType
    department: str
    location: str
    serial_number: str
    purchase_date: datetime
    status: AssetStatus
    assigned_user_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class DeleteResult(BaseModel):
    success: bool


# --- maintenance ---

class MaintenanceScheduleCreate(_Input):
    asset_id: int
    scheduled_date: UTCDateTime
    maintenance_type: str = Field(..., min_length=1)
    notes: Optional[str] = None


class MaintenanceScheduleUpdate(_Patch):
    _not_nullable: ClassVar[tuple[str, ...]] = ("status",)

    status: Optional[MaintenanceStatus] = None
    completed_date: Optional[UTCDateTime] = None
    notes: Optional[str] = None


class MaintenanceScheduleRead(BaseModel):
    id: int
    asset_id: int
    scheduled_date: datetime
    maintenance_type: str
    status: MaintenanceStatus
    notes: Optional[str] = None
    completed_date: Optional[datetime] = None
    created_at: datetime
    overdue: bool = False


# --- repair history ---

class RepairHistoryCreate(_Input):
    asset_id: int
    repair_date: UTCDateTime
    description: str = Field(..., min_length=1)
    cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    technician: str = Field(..., min_length=1)


class RepairHistoryRead(BaseModel):
    id: int
    asset_id: int
    repair_date: datetime
    description: str
    cost: Decimal
    technician: str
    created_at: datetime


# --- repair requests ---

class RepairRequestCreate(_Input):
    asset_id: int
    requested_by_user_id: int
    description: str = Field(..., min_length=1)
    priority: str = Field(..., min_length=1, description="low / medium / high / urgent")


class RepairRequestUpdate(_Patch):
    _not_nullable: ClassVar[tuple[str, ...]] = ("status",)

    status: Optional[RepairRequestStatus] = None
    completed_date: Optional[UTCDateTime] = None
    admin_notes: Optional[str] = None

    model_config = {
        "use_enum_values": True,
        "json_schema_extra": {
            "examples": [
                {"status": "in_progress"},
                {"status": "completed", "completed_date": "2026-01-12T08:30:00Z", "admin_notes": "replaced seal"},
                {"status": "rejected", "admin_notes": "not a fault"},
            ]
        },
    }


class RepairRequestRead(BaseModel):
    id: int
    asset_id: int
    requested_by_user_id: int
    description: str
    priority: str
    status: RepairRequestStatus
    requested_date: datetime
    completed_date: Optional[datetime] = None
    admin_notes: Optional[str] = None
    created_at: datetime


# --- reports ---

class AssetReport(BaseModel):
    total_assets: int
    assets_by_status: dict[str, int]
    assets_by_department: dict[str, int]
    assets_by_type: dict[str, int]
    maintenance_due: int
    repair_requests_pending: int
