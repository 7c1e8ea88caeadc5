# mynetwrk/crud/contacts.py
import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import String, exists, func, select
from sqlalchemy.orm import Session, selectinload

from mynetwrk.exceptions import NotFound, ReferenceNotFound, ValidationError
from mynetwrk.models.contact import Contact
from mynetwrk.models.group import Group, contact_groups

logger = logging.getLogger(__name__)

# fields a client may write; last_interaction* are owned by services.ledger
EDITABLE = {"full_name", "first_met", "avatar", "notes", "email", "phone"}

_ORDERINGS = {
    "fullName": lambda: (func.lower(Contact.full_name).asc(),),
    "lastInteraction": lambda: (Contact.last_interaction.desc().nulls_last(), func.lower(Contact.full_name)),
    "firstMet": lambda: (Contact.first_met.desc().nulls_last(), func.lower(Contact.full_name)),
    "createdAt": lambda: (Contact.created_at.desc(),),
}


def keep_digits_plus(s: str | None) -> str | None:
    if not s:
        return None
    out = []
    for ch in str(s):
        o = ord(ch)
        if (48 <= o <= 57) or ch in "+ ":
            out.append(ch)
    res = "".join(out).strip()
    return res or None


def icontains(column, text: str):
    """Case-insensitive substring match. `%`, `_` and the escape char in `text` are literal."""
    return func.lower(column, type_=String).contains(text.lower(), autoescape=True)


# ---------- ownership checks ----------
def contact_exists_for_user(db: Session, contact_id: str, user_id: str) -> bool:
    return db.execute(
        select(exists().where(Contact.id == str(contact_id), Contact.user_id == user_id))
    ).scalar_one()


def get_owned_contact(db: Session, contact_id: str, user_id: str, *, lock: bool = False) -> Optional[Contact]:
    stmt = select(Contact).where(Contact.id == str(contact_id), Contact.user_id == user_id)
    if lock:
        stmt = stmt.with_for_update()
    return db.execute(stmt).scalar_one_or_none()


def get_contact(db: Session, contact_id: str, user_id: str) -> Contact:
    obj = get_owned_contact(db, contact_id, user_id)
    if obj is None:
        raise NotFound("Contact not found")
    return obj


def get_owned_group(db: Session, group_id: str, user_id: str) -> Optional[Group]:
    return db.execute(
        select(Group).where(Group.id == str(group_id), Group.user_id == user_id)
    ).scalar_one_or_none()


def resolve_groups(db: Session, group_ids: Iterable[Any], user_id: str) -> List[Group]:
    """Load every referenced group; fail on the first one the user does not own."""
    wanted = list(dict.fromkeys(str(g) for g in group_ids))
    if not wanted:
        return []
    rows = db.execute(
        select(Group).where(Group.id.in_(wanted), Group.user_id == user_id)
    ).scalars().all()
    found = {g.id: g for g in rows}
    for gid in wanted:
        if gid not in found:
            raise ReferenceNotFound("Group", gid)
    return [found[gid] for gid in wanted]


def resolve_contacts(db: Session, contact_ids: Iterable[Any], user_id: str) -> List[Contact]:
    wanted = list(dict.fromkeys(str(c) for c in contact_ids))
    if not wanted:
        return []
    rows = db.execute(
        select(Contact).where(Contact.id.in_(wanted), Contact.user_id == user_id)
    ).scalars().all()
    found = {c.id: c for c in rows}
    for cid in wanted:
        if cid not in found:
            raise ReferenceNotFound("Contact", cid)
    return [found[cid] for cid in wanted]


# ---------- queries ----------
def list_contacts(db: Session, user_id: str) -> List[Contact]:
    return list(
        db.execute(
            select(Contact).where(Contact.user_id == user_id).order_by(*_ORDERINGS["fullName"]())
        ).scalars().all()
    )


def get_contact_detail(db: Session, contact_id: str, user_id: str) -> Contact:
    obj = db.execute(
        select(Contact)
        .options(selectinload(Contact.groups), selectinload(Contact.interactions))
        .where(Contact.id == str(contact_id), Contact.user_id == user_id)
    ).scalar_one_or_none()
    if obj is None:
        raise NotFound("Contact not found")
    return obj


def list_by_group(db: Session, group_id: str, user_id: str, *, order_by: str = "fullName") -> List[Contact]:
    if get_owned_group(db, group_id, user_id) is None:
        raise ReferenceNotFound("Group", group_id)
    stmt = (
        select(Contact)
        .join(contact_groups, contact_groups.c.contact_id == Contact.id)
        .where(contact_groups.c.group_id == str(group_id), Contact.user_id == user_id)
        .order_by(*_ORDERINGS.get(order_by, _ORDERINGS["fullName"])())
    )
    return list(db.execute(stmt).scalars().all())


def list_not_in_group(db: Session, group_id: str, user_id: str, *, search: str = "") -> List[Contact]:
    if get_owned_group(db, group_id, user_id) is None:
        raise ReferenceNotFound("Group", group_id)
    members = select(contact_groups.c.contact_id).where(contact_groups.c.group_id == str(group_id))
    stmt = select(Contact).where(Contact.user_id == user_id, Contact.id.not_in(members))
    search = (search or "").strip().lower()
    if search:
        stmt = stmt.where(icontains(Contact.full_name, search))
    return list(db.execute(stmt.order_by(*_ORDERINGS["fullName"]())).scalars().all())


# ---------- mutations ----------
def create_contact(db: Session, user_id: str, values: Dict[str, Any], group_ids: Optional[List[Any]] = None) -> Contact:
    # every group is checked before anything is written
    groups = resolve_groups(db, group_ids or [], user_id)
    if not (values.get("full_name") or "").strip():
        raise ValidationError("Full name is required")

    obj = Contact(user_id=user_id)
    for k, v in values.items():
        if k in EDITABLE:
            setattr(obj, k, v)
    obj.phone = keep_digits_plus(obj.phone)
    obj.groups = groups
    db.add(obj)
    db.commit()
    logger.info("contact created id=%s user=%s groups=%d", obj.id, user_id, len(groups))
    return obj


def update_contact(
    db: Session, contact_id: str, user_id: str, values: Dict[str, Any], group_ids: Optional[List[Any]] = None
) -> Contact:
    obj = get_contact(db, contact_id, user_id)
    groups = resolve_groups(db, group_ids, user_id) if group_ids is not None else None

    for k, v in values.items():
        if k == "full_name" and not (v or "").strip():
            raise ValidationError("Full name is required")
        if k in EDITABLE:
            setattr(obj, k, v)
    if "phone" in values:
        obj.phone = keep_digits_plus(obj.phone)
    if groups is not None:
        obj.groups = groups
    db.commit()
    db.refresh(obj)
    return obj


def delete_contact(db: Session, contact_id: str, user_id: str) -> Contact:
    """Deletes the contact and its interactions; its groups are only detached."""
    obj = get_contact(db, contact_id, user_id)
    db.delete(obj)
    db.commit()
    logger.info("contact deleted id=%s user=%s", contact_id, user_id)
    return obj


def add_to_group(db: Session, contact_id: str, group_id: str, user_id: str) -> Contact:
    obj = get_contact(db, contact_id, user_id)
    group = get_owned_group(db, group_id, user_id)
    if group is None:
        raise ReferenceNotFound("Group", group_id)
    if group not in obj.groups:
        obj.groups.append(group)
    db.commit()
    db.refresh(obj)
    return obj


def remove_from_group(db: Session, contact_id: str, group_id: str, user_id: str) -> Contact:
    obj = get_contact(db, contact_id, user_id)
    group = get_owned_group(db, group_id, user_id)
    if group is None:
        raise ReferenceNotFound("Group", group_id)
    if group in obj.groups:
        obj.groups.remove(group)
    db.commit()
    db.refresh(obj)
    return obj
