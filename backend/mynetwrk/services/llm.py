import logging
from typing import Optional

from openai import OpenAI
from sqlalchemy.orm import Session

from mynetwrk.core.config import settings
from mynetwrk.crud.users import get_user
from mynetwrk.exceptions import ExternalServiceError, SubscriptionRequired
from mynetwrk.schemas.ai import PromptKind

logger = logging.getLogger(__name__)

PROMPTS = {
    PromptKind.SUMMARY: (
        "Summarize the following text in a concise and informative way, but keep the same "
        "perspective as the original text and do not add any introduction from your part: "
    ),
    PromptKind.SPELLING: "Correct the following spelling mistakes: ",
}


def _client() -> Optional[OpenAI]:
    if not settings.OPENAI_API_KEY:
        return None
    return OpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.AI_TIMEOUT)


def _complete(cli: OpenAI, prompt: str, text: str) -> str:
    try:
        resp = cli.chat.completions.create(
            model=settings.AI_MODEL,
            messages=[{"role": "user", "content": f"{prompt}: {text}"}],
        )
    except Exception as exc:
        raise ExternalServiceError(f"completion request failed: {exc}") from exc
    if not resp.choices:
        raise ExternalServiceError("completion returned no choices")
    content = resp.choices[0].message.content
    if not content:
        raise ExternalServiceError("completion returned empty content")
    return content


def rewrite_text(db: Session, user_id: str, text: str, prompt: PromptKind = PromptKind.SUMMARY) -> str:
    """
    Summarize or spell-check ``text`` for a subscribed user.

    Fails open: without an API key, or when the provider errors, the
    original text comes back unchanged.
    """
    user = get_user(db, user_id)
    if not user.subscribed:
        raise SubscriptionRequired()
    if text == "":
        return text

    cli = _client()
    if cli is None:
        logger.warning("OPENAI_API_KEY not set; returning text unchanged")
        return text

    try:
        return _complete(cli, PROMPTS[prompt], text)
    except ExternalServiceError as exc:
        logger.warning("AI query failed, returning original text: %s", exc)
        return text
