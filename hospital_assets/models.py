from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """Current time as naive UTC, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    email: str = Field(unique=True)
    role: str                                   # admin / regular
    department: str
    created_at: datetime = Field(default_factory=utcnow)


class Asset(SQLModel, table=True):
    __tablename__ = "assets"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: str = Field(index=True)               # medical_equipment / furniture / it_device / vehicle
    department: str = Field(index=True)
    location: str
    serial_number: str = Field(unique=True)
    purchase_date: datetime
    status: str = Field(index=True)             # active / damaged / under_repair / inactive
    assigned_user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class MaintenanceSchedule(SQLModel, table=True):
    __tablename__ = "maintenance_schedules"

    id: Optional[int] = Field(default=None, primary_key=True)
    asset_id: int = Field(foreign_key="assets.id", index=True)
    scheduled_date: datetime
    maintenance_type: str
    status: str = Field(default="scheduled", index=True)   # scheduled / completed / overdue
    notes: Optional[str] = None
    completed_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)


class RepairHistory(SQLModel, table=True):
    __tablename__ = "repair_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    asset_id: int = Field(foreign_key="assets.id", index=True)
    repair_date: datetime
    description: str
    cost: Decimal = Field(max_digits=10, decimal_places=2)
    technician: str
    created_at: datetime = Field(default_factory=utcnow)


class RepairRequest(SQLModel, table=True):
    __tablename__ = "repair_requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    asset_id: int = Field(foreign_key="assets.id", index=True)
    requested_by_user_id: int = Field(foreign_key="users.id", index=True)
    description: str
    priority: str                               # free text, low / medium / high / urgent by convention
    status: str = Field(default="pending", index=True)     # pending / in_progress / completed / rejected
    requested_date: datetime = Field(default_factory=utcnow)
    completed_date: Optional[datetime] = None
    admin_notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
