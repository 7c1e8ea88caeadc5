from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from mynetwrk.schemas.contacts import ContactOut


# ---------- OUT MODELS ----------
class GroupOut(BaseModel):
    id: str
    icon: str
    name: str
    description: Optional[str] = None
    count: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class GroupDetail(GroupOut):
    contacts: List[ContactOut] = []


# ---------- IN MODELS ----------
class GroupCreate(BaseModel):
    icon: str = Field(min_length=1, max_length=16)
    name: str = Field(min_length=1, max_length=20)
    description: Optional[str] = Field(default=None, max_length=250)


class GroupUpdate(BaseModel):
    icon: Optional[str] = Field(default=None, min_length=1, max_length=16)
    name: Optional[str] = Field(default=None, min_length=1, max_length=20)
    description: Optional[str] = Field(default=None, max_length=250)


class GroupAddContacts(BaseModel):
    contact_ids: List[UUID] = Field(alias="contactIds", min_length=1)

    class Config:
        populate_by_name = True
