from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


# ---------- OUT MODELS ----------
class TimezoneOut(BaseModel):
    id: int
    name: str
    name_short: str
    offset: float

    class Config:
        from_attributes = True


class ConfigOut(BaseModel):
    reminder_emails: bool
    keep_in_touch: bool
    timezone_id: Optional[int] = None
    timezone: Optional[TimezoneOut] = None

    class Config:
        from_attributes = True


class UserOut(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    subscribed: bool = False
    config: Optional[ConfigOut] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ---------- IN MODELS ----------
class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=3, max_length=20)
    email: Optional[EmailStr] = None
    image: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _email_len(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > 50:
            raise ValueError("email must be at most 50 characters")
        return v


class ConfigUpdate(BaseModel):
    reminder_emails: Optional[bool] = Field(default=None, alias="reminderEmails")
    keep_in_touch: Optional[bool] = Field(default=None, alias="keepInTouch")
    timezone_id: Optional[int] = Field(default=None, alias="timezoneId")

    class Config:
        populate_by_name = True
        extra = "ignore"
