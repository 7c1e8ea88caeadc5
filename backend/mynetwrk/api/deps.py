# mynetwrk/api/deps.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from mynetwrk.core.config import settings
from mynetwrk.crud.users import get_or_create_user
from mynetwrk.db.session import get_db
from mynetwrk.exceptions import Unauthenticated
from mynetwrk.models.user import User


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Resolve the caller from the identity the auth provider forwarded.

    Sign-in itself happens upstream; by the time a request reaches us the
    user id (and, on first sign-in, profile hints) is in the headers.
    """
    user_id = (request.headers.get(settings.AUTH_USER_HEADER) or "").strip()
    if not user_id:
        raise Unauthenticated()
    return get_or_create_user(
        db,
        user_id,
        name=request.headers.get(settings.AUTH_NAME_HEADER) or None,
        email=request.headers.get(settings.AUTH_EMAIL_HEADER) or None,
        image=request.headers.get(settings.AUTH_IMAGE_HEADER) or None,
    )
