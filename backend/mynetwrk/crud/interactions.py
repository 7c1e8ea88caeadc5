# mynetwrk/crud/interactions.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from mynetwrk.crud.contacts import get_owned_contact
from mynetwrk.exceptions import NotFound
from mynetwrk.models.interaction import Interaction

# newest first; created_at/id keep equal dates in a stable order
NEWEST_FIRST = (Interaction.date.desc(), Interaction.created_at.desc(), Interaction.id.desc())


def get_owned_interaction(db: Session, interaction_id: str, user_id: str) -> Optional[Interaction]:
    return db.execute(
        select(Interaction).where(Interaction.id == str(interaction_id), Interaction.user_id == user_id)
    ).scalar_one_or_none()


def get_interaction(db: Session, interaction_id: str, user_id: str) -> Interaction:
    obj = get_owned_interaction(db, interaction_id, user_id)
    if obj is None:
        raise NotFound(f"Interaction with id {interaction_id} does not exist")
    return obj


def list_for_contact_id(db: Session, contact_id: str) -> List[Interaction]:
    """Every interaction currently referencing the contact, regardless of order."""
    return list(
        db.execute(select(Interaction).where(Interaction.contact_id == str(contact_id))).scalars().all()
    )


def list_interactions(db: Session, user_id: str) -> List[Interaction]:
    return list(
        db.execute(
            select(Interaction)
            .options(joinedload(Interaction.contact))
            .where(Interaction.user_id == user_id)
            .order_by(*NEWEST_FIRST)
        ).scalars().all()
    )


def list_by_contact(db: Session, contact_id: str, user_id: str) -> List[Interaction]:
    if get_owned_contact(db, contact_id, user_id) is None:
        raise NotFound("Contact not found")
    return list(
        db.execute(
            select(Interaction)
            .where(Interaction.user_id == user_id, Interaction.contact_id == str(contact_id))
            .order_by(*NEWEST_FIRST)
        ).scalars().all()
    )
