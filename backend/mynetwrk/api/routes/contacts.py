# mynetwrk/api/routes/contacts.py
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.crud import contacts as crud
from mynetwrk.models.user import User
from mynetwrk.schemas.contacts import (
    ContactCreate,
    ContactDetail,
    ContactOrderBy,
    ContactOut,
    ContactUpdate,
)

router = APIRouter(prefix="/contacts", tags=["contacts"])


# GET /api/contacts
@router.get("", response_model=List[ContactOut])
def list_contacts(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.list_contacts(db, user.id)


# GET /api/contacts/by-group/{group_id}?orderBy=lastInteraction
@router.get("/by-group/{group_id}", response_model=List[ContactOut])
def list_contacts_by_group(
    group_id: str,
    order_by: ContactOrderBy = Query("fullName", alias="orderBy"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return crud.list_by_group(db, group_id, user.id, order_by=order_by)


# GET /api/contacts/not-in-group/{group_id}?search=jo  (group member picker)
@router.get("/not-in-group/{group_id}", response_model=List[ContactOut])
def list_contacts_not_in_group(
    group_id: str,
    search: str = Query(""),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return crud.list_not_in_group(db, group_id, user.id, search=search)


# GET /api/contacts/{id}
@router.get("/{id}", response_model=ContactDetail)
def get_contact(id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.get_contact_detail(db, id, user.id)


# POST /api/contacts
@router.post("", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
def create_contact(payload: ContactCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    values = payload.model_dump(exclude={"groups"})
    return crud.create_contact(db, user.id, values, group_ids=payload.groups)


# PATCH /api/contacts/{id} (partial update; `groups`, when sent, replaces membership)
@router.patch("/{id}", response_model=ContactOut)
def update_contact(
    id: str, payload: ContactUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    values = payload.model_dump(exclude_unset=True, exclude={"groups"})
    return crud.update_contact(db, id, user.id, values, group_ids=payload.groups)


# DELETE /api/contacts/{id}
@router.delete("/{id}", response_model=ContactOut)
def delete_contact(id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.delete_contact(db, id, user.id)


# POST /api/contacts/{id}/groups/{group_id}
@router.post("/{id}/groups/{group_id}", response_model=ContactDetail)
def add_contact_to_group(
    id: str, group_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return crud.add_to_group(db, id, group_id, user.id)


# DELETE /api/contacts/{id}/groups/{group_id}
@router.delete("/{id}/groups/{group_id}", response_model=ContactDetail)
def remove_contact_from_group(
    id: str, group_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return crud.remove_from_group(db, id, group_id, user.id)
