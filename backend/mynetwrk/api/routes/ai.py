# mynetwrk/api/routes/ai.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mynetwrk.api.deps import get_current_user
from mynetwrk.db.session import get_db
from mynetwrk.models.user import User
from mynetwrk.schemas.ai import AIQuery, AIQueryResult
from mynetwrk.services.llm import rewrite_text

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/query", response_model=AIQueryResult)
def query(payload: AIQuery, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"text": rewrite_text(db, user.id, payload.text, payload.prompt)}
