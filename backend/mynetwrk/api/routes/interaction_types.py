# mynetwrk/api/routes/interaction_types.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.crud import interaction_types as crud
from mynetwrk.models.user import User
from mynetwrk.schemas.interactions import InteractionTypeIn, InteractionTypeOut
from mynetwrk.services.ledger import rename_interaction_type

router = APIRouter(prefix="/interaction-types", tags=["interaction-types"])


@router.get("", response_model=List[InteractionTypeOut])
def list_types(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.list_types(db, user.id)


@router.post("", response_model=InteractionTypeOut, status_code=status.HTTP_201_CREATED)
def create_type(payload: InteractionTypeIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.create_type(db, user.id, payload.name)


@router.patch("/{id}", response_model=InteractionTypeOut)
def update_type(
    id: str, payload: InteractionTypeIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    return rename_interaction_type(db, id, user.id, payload.name)


@router.delete("/{id}", response_model=InteractionTypeOut)
def delete_type(id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return crud.delete_type(db, id, user.id)
