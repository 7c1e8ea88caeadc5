# mynetwrk/models/timezone.py
from sqlalchemy import Column, Float, Integer, String

from mynetwrk.models.base import Base


class Timezone(Base):
    """Static reference table, seeded once (see mynetwrk.db.seed)."""

    __tablename__ = "timezones"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    name_short = Column(String, nullable=False)
    # hours east of UTC, e.g. 5.5 for Asia/Kolkata
    offset = Column(Float, nullable=False)
