# mynetwrk/db/seed.py
"""Reference data: timezones and the global interaction types.

Safe to run on every startup; only missing rows are inserted.
"""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from mynetwrk.models.interaction import InteractionType
from mynetwrk.models.timezone import Timezone

logger = logging.getLogger(__name__)

# (name, short name, offset hours)
TIMEZONES = [
    ("Pacific/Honolulu", "HST", -10.0),
    ("America/Anchorage", "AKST", -9.0),
    ("America/Los_Angeles", "PST", -8.0),
    ("America/Denver", "MST", -7.0),
    ("America/Chicago", "CST", -6.0),
    ("America/New_York", "EST", -5.0),
    ("America/Halifax", "AST", -4.0),
    ("America/Sao_Paulo", "BRT", -3.0),
    ("Atlantic/Azores", "AZOT", -1.0),
    ("Europe/London", "GMT", 0.0),
    ("Europe/Berlin", "CET", 1.0),
    ("Europe/Athens", "EET", 2.0),
    ("Europe/Moscow", "MSK", 3.0),
    ("Asia/Dubai", "GST", 4.0),
    ("Asia/Karachi", "PKT", 5.0),
    ("Asia/Kolkata", "IST", 5.5),
    ("Asia/Dhaka", "BST", 6.0),
    ("Asia/Bangkok", "ICT", 7.0),
    ("Asia/Singapore", "SGT", 8.0),
    ("Asia/Tokyo", "JST", 9.0),
    ("Australia/Sydney", "AEST", 10.0),
    ("Pacific/Auckland", "NZST", 12.0),
]

INTERACTION_TYPES = ["Call", "Coffee", "Email", "Meeting", "Message", "Video Call"]


def seed_reference_data(db: Session) -> None:
    known_tz = set(db.execute(select(Timezone.name)).scalars().all())
    added_tz = 0
    for name, short, offset in TIMEZONES:
        if name in known_tz:
            continue
        db.add(Timezone(name=name, name_short=short, offset=offset))
        added_tz += 1

    known_types = set(
        db.execute(select(InteractionType.name).where(InteractionType.user_id.is_(None))).scalars().all()
    )
    added_types = 0
    for name in INTERACTION_TYPES:
        if name in known_types:
            continue
        db.add(InteractionType(name=name, user_id=None))
        added_types += 1

    db.commit()
    if added_tz or added_types:
        logger.info("seeded %d timezones, %d interaction types", added_tz, added_types)
