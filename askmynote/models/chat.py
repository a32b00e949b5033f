from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from askmynote.models.subject import Subject


class Role(str, Enum):
    user = "user"
    assistant = "assistant"


class Confidence(str, Enum):
    high = "HIGH"
    medium = "MEDIUM"
    low = "LOW"


class ChatTurn(BaseModel):
    role: Role
    content: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    subject: Subject
    focusLevel: int = Field(default=50, ge=0, le=100, description="0 = simplifié, 100 = technique")


class ChatResponse(BaseModel):
    text: Optional[str] = None
    error: Optional[str] = None
    # Texte sans annotations [..] pour la synthèse vocale
    speech: Optional[str] = None
    citations: List[str] = Field(default_factory=list)
    confidence: Optional[Confidence] = None
    # Tour assistant à ajouter à la conversation (réponse ou message d'erreur)
    turn: ChatTurn
