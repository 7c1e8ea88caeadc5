from enum import Enum

from pydantic import BaseModel


class PromptKind(str, Enum):
    SUMMARY = "SUMMARY"
    SPELLING = "SPELLING"


class AIQuery(BaseModel):
    text: str
    prompt: PromptKind = PromptKind.SUMMARY


class AIQueryResult(BaseModel):
    text: str
