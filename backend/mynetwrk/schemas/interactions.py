from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from mynetwrk.core.config import settings
from mynetwrk.schemas.common import UtcDateTime


# ---------- OUT MODELS ----------
class InteractionTypeOut(BaseModel):
    id: str
    name: str
    user_id: Optional[str] = None  # None = global type

    class Config:
        from_attributes = True


class InteractionOut(BaseModel):
    id: str
    date: datetime
    notes: Optional[str] = None
    contact_id: str
    type_id: str
    type: Optional[InteractionTypeOut] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContactRef(BaseModel):
    id: str
    full_name: str
    avatar: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class InteractionWithContact(InteractionOut):
    contact: ContactRef


# ---------- IN MODELS ----------
class InteractionCreate(BaseModel):
    date: UtcDateTime
    notes: Optional[str] = Field(default=None, max_length=settings.INTERACTION_NOTES_MAX)
    contact_id: UUID = Field(alias="contactId")
    type_id: UUID = Field(alias="typeId")

    class Config:
        populate_by_name = True
        extra = "ignore"


class InteractionUpdate(BaseModel):
    date: UtcDateTime
    notes: Optional[str] = Field(default=None, max_length=settings.INTERACTION_NOTES_MAX)
    type_id: UUID = Field(alias="typeId")

    class Config:
        populate_by_name = True
        extra = "ignore"


class InteractionTypeIn(BaseModel):
    name: str = Field(min_length=3, max_length=25)


class InteractionList(BaseModel):
    items: List[InteractionWithContact]
