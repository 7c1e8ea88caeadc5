from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from mynetwrk.models.timezone import Timezone


def list_timezones(db: Session) -> List[Timezone]:
    return list(
        db.execute(select(Timezone).order_by(Timezone.offset, Timezone.name)).scalars().all()
    )
