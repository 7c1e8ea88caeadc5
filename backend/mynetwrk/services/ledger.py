# mynetwrk/services/ledger.py
"""Interaction ledger.

Writes interaction rows and keeps the owning contact's cached
``last_interaction`` / ``last_interaction_type`` in step with them.

After every create, update and delete the contact's cache is rebuilt from a
full rescan of its interactions (never patched incrementally), inside the
same transaction as the interaction write. The contact row is locked first
(``SELECT ... FOR UPDATE`` on backends that support it) so two requests
touching the same contact cannot interleave between the write and the
rescan.
"""
import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from mynetwrk.crud.contacts import get_owned_contact
from mynetwrk.crud.interaction_types import get_usable_type, rename_type
from mynetwrk.crud.interactions import get_interaction, list_for_contact_id
from mynetwrk.exceptions import ReferenceNotFound
from mynetwrk.models.contact import Contact
from mynetwrk.models.interaction import Interaction, InteractionType

logger = logging.getLogger(__name__)


def _recency_key(it: Interaction) -> tuple:
    # equal dates: the later insert wins, then the greater id
    return (it.date, it.created_at or datetime.min, it.id)


def derive_last_interaction(interactions: Iterable[Interaction]) -> Optional[Tuple[datetime, str]]:
    """Return ``(date, type name)`` of the most recent interaction, or None if there are none."""
    latest = max(interactions, key=_recency_key, default=None)
    if latest is None:
        return None
    return latest.date, latest.type.name


def refresh_last_interaction(db: Session, contact: Contact) -> Contact:
    """Rescan the contact's interactions and rewrite its cached fields. Does not commit."""
    db.flush()
    derived = derive_last_interaction(list_for_contact_id(db, contact.id))
    if derived is None:
        contact.last_interaction, contact.last_interaction_type = None, None
    else:
        contact.last_interaction, contact.last_interaction_type = derived
    return contact


def _lock_contact(db: Session, contact_id: str, user_id: str) -> Contact:
    contact = get_owned_contact(db, contact_id, user_id, lock=True)
    if contact is None:
        raise ReferenceNotFound("Contact", contact_id)
    return contact


def create_interaction(
    db: Session,
    user_id: str,
    *,
    date: datetime,
    contact_id: str,
    type_id: str,
    notes: Optional[str] = None,
) -> Interaction:
    itype = get_usable_type(db, type_id, user_id)
    contact = _lock_contact(db, contact_id, user_id)
    row = Interaction(
        date=date,
        notes=notes,
        user_id=user_id,
        contact_id=contact.id,
        type_id=itype.id,
        type=itype,
    )
    db.add(row)
    refresh_last_interaction(db, contact)
    db.commit()
    logger.info("interaction created id=%s contact=%s user=%s", row.id, contact.id, user_id)
    return row


def update_interaction(
    db: Session,
    interaction_id: str,
    user_id: str,
    *,
    date: datetime,
    type_id: str,
    notes: Optional[str] = None,
) -> Interaction:
    """
    Move an owned interaction to a new date, type and notes, then re-derive the contact.

    The new type only has to be usable (owned by the caller or global), the same
    rule as create. Requiring ownership here would make interactions logged with
    a global type impossible to edit.
    """
    row = get_interaction(db, interaction_id, user_id)
    itype = get_usable_type(db, type_id, user_id)
    contact = _lock_contact(db, row.contact_id, user_id)
    row.date = date
    row.notes = notes
    row.type_id = itype.id
    row.type = itype
    refresh_last_interaction(db, contact)
    db.commit()
    logger.info("interaction updated id=%s contact=%s user=%s", row.id, contact.id, user_id)
    return row


def delete_interaction(db: Session, interaction_id: str, user_id: str) -> Interaction:
    """Delete an owned interaction and return the deleted row."""
    row = get_interaction(db, interaction_id, user_id)
    contact = _lock_contact(db, row.contact_id, user_id)
    db.delete(row)
    refresh_last_interaction(db, contact)
    db.commit()
    logger.info("interaction deleted id=%s contact=%s user=%s", interaction_id, contact.id, user_id)
    return row


def rename_interaction_type(db: Session, type_id: str, user_id: str, name: str) -> InteractionType:
    """Rename a type and re-derive every contact whose interactions use it."""
    itype = rename_type(db, type_id, user_id, name)
    affected: List[Contact] = list(
        db.execute(
            select(Contact)
            .where(Contact.id.in_(select(Interaction.contact_id).where(Interaction.type_id == itype.id)))
            .with_for_update()
        ).scalars().all()
    )
    for contact in affected:
        refresh_last_interaction(db, contact)
    db.commit()
    logger.info("interaction type renamed id=%s contacts=%d", itype.id, len(affected))
    return itype
