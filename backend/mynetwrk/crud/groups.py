# mynetwrk/crud/groups.py
import logging
from typing import Any, Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from mynetwrk.crud.contacts import get_owned_group, resolve_contacts
from mynetwrk.exceptions import NotFound
from mynetwrk.models.group import Group, contact_groups

logger = logging.getLogger(__name__)

SELECTABLE = {"icon", "name", "description"}


def _attach_counts(db: Session, groups: List[Group]) -> List[Group]:
    """Set the derived member count on each group (never stored)."""
    ids = [g.id for g in groups]
    counts: Dict[str, int] = {}
    if ids:
        rows = db.execute(
            select(contact_groups.c.group_id, func.count())
            .where(contact_groups.c.group_id.in_(ids))
            .group_by(contact_groups.c.group_id)
        ).all()
        counts = {gid: n for gid, n in rows}
    for g in groups:
        g.count = counts.get(g.id, 0)
    return groups


def get_group(db: Session, group_id: str, user_id: str) -> Group:
    group = get_owned_group(db, group_id, user_id)
    if group is None:
        raise NotFound("Group not found")
    return _attach_counts(db, [group])[0]


def list_groups(db: Session, user_id: str) -> List[Group]:
    rows = db.execute(
        select(Group).where(Group.user_id == user_id).order_by(func.lower(Group.name), Group.created_at)
    ).scalars().all()
    return _attach_counts(db, list(rows))


def create_group(db: Session, user_id: str, values: Dict[str, Any]) -> Group:
    group = Group(user_id=user_id)
    for k, v in values.items():
        if k in SELECTABLE:
            setattr(group, k, v)
    db.add(group)
    db.commit()
    logger.info("group created id=%s user=%s", group.id, user_id)
    group.count = 0
    return group


def update_group(db: Session, group_id: str, user_id: str, values: Dict[str, Any]) -> Group:
    group = get_group(db, group_id, user_id)
    for k, v in values.items():
        # icon and name are required columns
        if k in ("icon", "name") and v is None:
            continue
        if k in SELECTABLE:
            setattr(group, k, v)
    db.commit()
    return _attach_counts(db, [group])[0]


def delete_group(db: Session, group_id: str, user_id: str) -> Group:
    """Irreversible. Member contacts are detached, not deleted."""
    group = get_group(db, group_id, user_id)
    group.contacts = []
    db.delete(group)
    db.commit()
    logger.info("group deleted id=%s user=%s", group_id, user_id)
    return group


def add_many_contacts(db: Session, group_id: str, user_id: str, contact_ids: List[Any]) -> Group:
    group = get_group(db, group_id, user_id)
    # all-or-nothing: a single foreign id rejects the whole batch
    contacts = resolve_contacts(db, contact_ids, user_id)
    present = {c.id for c in group.contacts}
    for c in contacts:
        if c.id not in present:
            group.contacts.append(c)
    db.commit()
    return _attach_counts(db, [group])[0]
