# mynetwrk/services/search.py
from dataclasses import dataclass, field
from typing import Dict, List

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from mynetwrk.crud.contacts import icontains
from mynetwrk.crud.interactions import NEWEST_FIRST
from mynetwrk.models.contact import Contact
from mynetwrk.models.interaction import Interaction


@dataclass
class SearchHit:
    contact: Contact
    # only the interactions whose own notes matched
    interactions: List[Interaction] = field(default_factory=list)


def search(db: Session, user_id: str, query: str) -> List[SearchHit]:
    """
    Case-insensitive substring search over a user's contacts and interaction notes.

    A contact is returned when its name, phone, email or notes match, or when
    any of its interactions' notes match. Whatever the reason for including a
    contact, the attached interactions are only the ones whose notes match.
    An empty query returns nothing.
    """
    q = (query or "").strip().lower()
    if not q:
        return []
    notes_match = icontains(Interaction.notes, q)
    matching_contacts = select(Interaction.contact_id).where(Interaction.user_id == user_id, notes_match)

    contacts = db.execute(
        select(Contact)
        .where(
            Contact.user_id == user_id,
            or_(
                icontains(Contact.full_name, q),
                icontains(Contact.phone, q),
                icontains(Contact.email, q),
                icontains(Contact.notes, q),
                Contact.id.in_(matching_contacts),
            ),
        )
        .order_by(func.lower(Contact.full_name))
    ).scalars().all()
    if not contacts:
        return []

    by_contact: Dict[str, List[Interaction]] = {c.id: [] for c in contacts}
    rows = db.execute(
        select(Interaction)
        .where(Interaction.user_id == user_id, Interaction.contact_id.in_(list(by_contact)), notes_match)
        .order_by(*NEWEST_FIRST)
    ).scalars().all()
    for it in rows:
        by_contact[it.contact_id].append(it)

    return [SearchHit(contact=c, interactions=by_contact[c.id]) for c in contacts]
