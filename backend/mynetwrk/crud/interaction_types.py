# mynetwrk/crud/interaction_types.py
import logging
from typing import List, Optional

from sqlalchemy import exists, func, or_, select
from sqlalchemy.orm import Session

from mynetwrk.exceptions import Conflict, NotFound, ReferenceNotFound, ValidationError
from mynetwrk.models.interaction import Interaction, InteractionType

logger = logging.getLogger(__name__)


def _usable_by(user_id: str):
    return or_(InteractionType.user_id == user_id, InteractionType.user_id.is_(None))


def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if len(name) < 3:
        raise ValidationError("Name must be at least 3 characters")
    return name


def interaction_type_is_usable(db: Session, type_id: str, user_id: str) -> bool:
    """True if the type is owned by the user or shared globally."""
    return db.execute(
        select(exists().where(InteractionType.id == str(type_id), _usable_by(user_id)))
    ).scalar_one()


def get_usable_type(db: Session, type_id: str, user_id: str) -> InteractionType:
    row = db.execute(
        select(InteractionType).where(InteractionType.id == str(type_id), _usable_by(user_id))
    ).scalar_one_or_none()
    if row is None:
        raise ReferenceNotFound("Interaction type", type_id)
    return row


def get_owned_type(db: Session, type_id: str, user_id: str) -> Optional[InteractionType]:
    return db.execute(
        select(InteractionType).where(InteractionType.id == str(type_id), InteractionType.user_id == user_id)
    ).scalar_one_or_none()


def list_types(db: Session, user_id: str) -> List[InteractionType]:
    return list(
        db.execute(
            select(InteractionType)
            .where(_usable_by(user_id))
            .order_by(func.lower(InteractionType.name), InteractionType.id)
        ).scalars().all()
    )


def create_type(db: Session, user_id: str, name: str) -> InteractionType:
    row = InteractionType(name=_clean_name(name), user_id=user_id)
    db.add(row)
    db.commit()
    logger.info("interaction type created id=%s user=%s", row.id, user_id)
    return row


def rename_type(db: Session, type_id: str, user_id: str, name: str) -> InteractionType:
    """Rename an owned type. Global types are read-only.

    Does not commit: the caller re-derives the contacts that cache this
    type's name and commits both together.
    """
    row = get_owned_type(db, type_id, user_id)
    if row is None:
        raise NotFound("Interaction type not found")
    row.name = _clean_name(name)
    db.flush()
    return row


def delete_type(db: Session, type_id: str, user_id: str) -> InteractionType:
    row = get_owned_type(db, type_id, user_id)
    if row is None:
        raise NotFound("Interaction type not found")
    in_use = db.execute(select(exists().where(Interaction.type_id == row.id))).scalar_one()
    if in_use:
        raise Conflict("Interaction type is still used by interactions")
    db.delete(row)
    db.commit()
    logger.info("interaction type deleted id=%s user=%s", type_id, user_id)
    return row
