# mynetwrk/models/user.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mynetwrk.models.base import Base, _now, _uuid


class User(Base):
    __tablename__ = "users"

    # identity key handed over by the auth provider
    id = Column(String, primary_key=True)
    name = Column(String(50), nullable=True)
    email = Column(String(50), nullable=True, index=True)
    image = Column(String, nullable=True)
    subscribed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=True)

    config = relationship("Config", back_populates="user", uselist=False, cascade="all, delete-orphan")


class Config(Base):
    __tablename__ = "configs"

    id = Column(String, primary_key=True, default=_uuid)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    reminder_emails = Column(Boolean, nullable=False, default=True)
    keep_in_touch = Column(Boolean, nullable=False, default=False)
    timezone_id = Column(Integer, ForeignKey("timezones.id"), nullable=True)

    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=True)

    user = relationship("User", back_populates="config")
    timezone = relationship("Timezone")
