# mynetwrk/api/routes/users.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.crud.users import ensure_config, update_user, upsert_config
from mynetwrk.models.user import User
from mynetwrk.schemas.contacts import ContactOut, ContactSearchResult
from mynetwrk.schemas.interactions import InteractionOut
from mynetwrk.schemas.users import ConfigUpdate, UserOut, UserUpdate
from mynetwrk.services.search import search

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    ensure_config(db, user)
    return user


# POST /api/users/init: first-run bootstrap, safe to repeat
@router.post("/init", response_model=UserOut)
def init(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    ensure_config(db, user)
    return user


@router.patch("/me", response_model=UserOut)
def update_me(payload: UserUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return update_user(db, user.id, payload.model_dump(exclude_unset=True))


@router.put("/me/config", response_model=UserOut)
def update_config(payload: ConfigUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return upsert_config(db, user.id, payload.model_dump(exclude_unset=True))


# GET /api/users/search?q=smith
@router.get("/search", response_model=List[ContactSearchResult])
def search_contacts(
    q: str = Query("", alias="q"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    hits = search(db, user.id, q)
    return [
        ContactSearchResult(
            **ContactOut.model_validate(h.contact).model_dump(),
            interactions=[InteractionOut.model_validate(i) for i in h.interactions],
        )
        for h in hits
    ]
