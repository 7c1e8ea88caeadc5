# mynetwrk/api/routes/timezones.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.crud.timezones import list_timezones
from mynetwrk.models.user import User
from mynetwrk.schemas.users import TimezoneOut

router = APIRouter(prefix="/timezones", tags=["timezones"])


@router.get("", response_model=List[TimezoneOut])
def get_all(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_timezones(db)
