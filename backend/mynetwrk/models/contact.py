# mynetwrk/models/contact.py
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from mynetwrk.models.base import Base, _now, _uuid
from mynetwrk.models.group import contact_groups


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String, primary_key=True, default=_uuid)
    full_name = Column(String(50), nullable=False, index=True)
    avatar = Column(Text, nullable=True)  # data URI
    first_met = Column(DateTime, nullable=True)
    notes = Column(Text, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)

    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    # derived from the interactions, written only by services.ledger
    last_interaction = Column(DateTime, nullable=True)
    last_interaction_type = Column(String(25), nullable=True)

    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=True)

    groups = relationship("Group", secondary=contact_groups, back_populates="contacts")
    interactions = relationship(
        "Interaction",
        back_populates="contact",
        cascade="all, delete-orphan",
        order_by="Interaction.date.desc()",
    )
