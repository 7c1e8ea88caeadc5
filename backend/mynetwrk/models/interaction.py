# mynetwrk/models/interaction.py
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from mynetwrk.models.base import Base, _now, _uuid


class InteractionType(Base):
    __tablename__ = "interaction_types"

    id = Column(String, primary_key=True, default=_uuid)
    name = Column(String(25), nullable=False)
    # NULL owner = shared by every user
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=True)

    created_at = Column(DateTime, default=_now, nullable=False)


class Interaction(Base):
    __tablename__ = "interactions"

    id = Column(String, primary_key=True, default=_uuid)
    date = Column(DateTime, nullable=False, index=True)
    notes = Column(Text, nullable=True)

    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    contact_id = Column(String, ForeignKey("contacts.id", ondelete="CASCADE"), index=True, nullable=False)
    type_id = Column(String, ForeignKey("interaction_types.id"), index=True, nullable=False)

    # insertion time, second key when two interactions share a date
    created_at = Column(DateTime, default=_now, nullable=False)

    contact = relationship("Contact", back_populates="interactions")
    type = relationship("InteractionType", lazy="joined")
