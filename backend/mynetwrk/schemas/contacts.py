from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from mynetwrk.core.config import settings
from mynetwrk.schemas.common import UtcDateTime
from mynetwrk.schemas.interactions import InteractionOut

ContactOrderBy = Literal["fullName", "lastInteraction", "firstMet", "createdAt"]


# ---------- OUT MODELS ----------
class GroupRef(BaseModel):
    id: str
    icon: str
    name: str

    class Config:
        from_attributes = True


class ContactOut(BaseModel):
    id: str
    full_name: str
    avatar: Optional[str] = None
    first_met: Optional[datetime] = None
    notes: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    last_interaction: Optional[datetime] = None
    last_interaction_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContactDetail(ContactOut):
    groups: List[GroupRef] = []
    interactions: List[InteractionOut] = []


class ContactSearchResult(ContactOut):
    # only the interactions whose notes matched the query
    interactions: List[InteractionOut] = []


# ---------- IN MODELS ----------
class ContactCreate(BaseModel):
    full_name: str = Field(alias="fullName", min_length=1, max_length=50)
    first_met: Optional[UtcDateTime] = Field(default=None, alias="firstMet")
    avatar: Optional[str] = Field(default=None, max_length=10000)
    notes: Optional[str] = Field(default=None, max_length=settings.CONTACT_NOTES_MAX)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=30)
    groups: Optional[List[UUID]] = None

    class Config:
        populate_by_name = True
        extra = "ignore"


# PATCH: only the fields that were sent are applied
class ContactUpdate(BaseModel):
    full_name: Optional[str] = Field(default=None, alias="fullName", min_length=1, max_length=50)
    first_met: Optional[UtcDateTime] = Field(default=None, alias="firstMet")
    avatar: Optional[str] = Field(default=None, max_length=10000)
    notes: Optional[str] = Field(default=None, max_length=settings.CONTACT_NOTES_MAX)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=30)
    groups: Optional[List[UUID]] = None

    class Config:
        populate_by_name = True
        extra = "ignore"
