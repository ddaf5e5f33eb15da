"""Per-user settings stored as key/value rows."""

from __future__ import annotations

from typing import ClassVar

from sqlmodel import Field, SQLModel


class UserSetting(SQLModel, table=True):
    """Key-value storage for a user's habit tracking options."""

    __tablename__: ClassVar[str] = "user_setting"

    user_id: str = Field(primary_key=True, max_length=64)
    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(nullable=False, max_length=255)
