# mynetwrk/api/routes/interactions.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.crud.interactions import list_by_contact, list_interactions
from mynetwrk.models.user import User
from mynetwrk.schemas.interactions import (
    InteractionCreate,
    InteractionOut,
    InteractionUpdate,
    InteractionWithContact,
)
from mynetwrk.services import ledger

router = APIRouter(prefix="/interactions", tags=["interactions"])


@router.get("", response_model=List[InteractionWithContact])
def get_all(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_interactions(db, user.id)


@router.get("/by-contact/{contact_id}", response_model=List[InteractionOut])
def get_all_by_contact_id(contact_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_by_contact(db, contact_id, user.id)


@router.post("", response_model=InteractionOut, status_code=status.HTTP_201_CREATED)
def create_interaction(
    payload: InteractionCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return ledger.create_interaction(
        db,
        user.id,
        date=payload.date,
        notes=payload.notes,
        contact_id=str(payload.contact_id),
        type_id=str(payload.type_id),
    )


@router.patch("/{id}", response_model=InteractionOut)
def update_interaction(
    id: str, payload: InteractionUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return ledger.update_interaction(
        db,
        id,
        user.id,
        date=payload.date,
        notes=payload.notes,
        type_id=str(payload.type_id),
    )


@router.delete("/{id}", response_model=InteractionOut)
def delete_interaction(id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return ledger.delete_interaction(db, id, user.id)
