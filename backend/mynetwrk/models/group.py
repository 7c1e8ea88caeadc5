# mynetwrk/models/group.py
from sqlalchemy import Column, DateTime, ForeignKey, String, Table
from sqlalchemy.orm import relationship

from mynetwrk.models.base import Base, _now, _uuid

# membership rows only; deleting either side detaches, never deletes the other
contact_groups = Table(
    "contact_groups",
    Base.metadata,
    Column("contact_id", String, ForeignKey("contacts.id", ondelete="CASCADE"), primary_key=True),
    Column("group_id", String, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True),
)


class Group(Base):
    __tablename__ = "groups"

    id = Column(String, primary_key=True, default=_uuid)
    icon = Column(String(16), nullable=False)
    name = Column(String(20), nullable=False, index=True)
    description = Column(String(250), nullable=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=True)

    contacts = relationship("Contact", secondary=contact_groups, back_populates="groups")
