# mynetwrk/api/routes/groups.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.crud import groups as crud
from mynetwrk.models.user import User
from mynetwrk.schemas.groups import GroupAddContacts, GroupCreate, GroupDetail, GroupOut, GroupUpdate

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=List[GroupOut])
def list_groups(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.list_groups(db, user.id)


@router.get("/{id}", response_model=GroupDetail)
def get_group(id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    group = crud.get_group(db, id, user.id)
    detail = GroupDetail.model_validate(group)
    detail.contacts.sort(key=lambda c: c.full_name.lower())
    return detail


@router.post("", response_model=GroupOut, status_code=status.HTTP_201_CREATED)
def create_group(payload: GroupCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.create_group(db, user.id, payload.model_dump())


@router.patch("/{id}", response_model=GroupOut)
def update_group(
    id: str, payload: GroupUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return crud.update_group(db, id, user.id, payload.model_dump(exclude_unset=True))


@router.delete("/{id}", response_model=GroupOut)
def delete_group(id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.delete_group(db, id, user.id)


# POST /api/groups/{id}/contacts  {"contactIds": [...]}
@router.post("/{id}/contacts", response_model=GroupOut)
def add_many_contacts(
    id: str, payload: GroupAddContacts, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return crud.add_many_contacts(db, id, user.id, payload.contact_ids)
