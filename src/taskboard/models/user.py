from enum import Enum

from pydantic import Field

from taskboard.models.base import RecordModel, UpdateModel


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class UserCreate(RecordModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=200)
    role: UserRole = UserRole.USER
    avatar: str | None = None
    department: str = ""
    position: str = ""


class User(UserCreate):
    id: str


class UserUpdate(UpdateModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=1, max_length=200)
    role: UserRole | None = None
    avatar: str | None = None
    department: str | None = None
    position: str | None = None
