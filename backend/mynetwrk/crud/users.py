# mynetwrk/crud/users.py
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mynetwrk.exceptions import NotFound, ReferenceNotFound
from mynetwrk.models.timezone import Timezone
from mynetwrk.models.user import Config, User

logger = logging.getLogger(__name__)

USER_FIELDS = {"name", "email", "image"}
CONFIG_FIELDS = {"reminder_emails", "keep_in_touch", "timezone_id"}


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def get_or_create_user(
    db: Session,
    user_id: str,
    *,
    name: Optional[str] = None,
    email: Optional[str] = None,
    image: Optional[str] = None,
) -> User:
    """Return the user for an authenticated identity, creating it on first sight."""
    user = db.get(User, user_id)
    if user is not None:
        return user
    user = User(id=user_id, name=name, email=email, image=image, subscribed=False)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent first request created it
        db.rollback()
        return get_user(db, user_id)
    logger.info("user created id=%s", user_id)
    return user


def ensure_config(db: Session, user: User) -> Config:
    if user.config is None:
        user.config = Config()
        db.commit()
        db.refresh(user)
    return user.config


def update_user(db: Session, user_id: str, values: Dict[str, Any]) -> User:
    user = get_user(db, user_id)
    for k, v in values.items():
        if k in USER_FIELDS:
            setattr(user, k, v)
    db.commit()
    db.refresh(user)
    return user


def upsert_config(db: Session, user_id: str, values: Dict[str, Any]) -> User:
    """Create the config row if missing, else update the same fields."""
    user = get_user(db, user_id)
    tz_id = values.get("timezone_id")
    if tz_id is not None and db.get(Timezone, tz_id) is None:
        raise ReferenceNotFound("Timezone", tz_id)

    if user.config is None:
        user.config = Config()
    for k, v in values.items():
        # the flags are NOT NULL; only the timezone can be cleared
        if k in CONFIG_FIELDS and (v is not None or k == "timezone_id"):
            setattr(user.config, k, v)
    db.commit()
    db.refresh(user)
    return user
