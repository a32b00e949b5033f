from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from askmynote.models.subject import Subject


class MCQ(BaseModel):
    # le modèle renvoie souvent des nombres bruts (options [2, 3, 4, 5], réponse 42)
    model_config = ConfigDict(coerce_numbers_to_str=True)

    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=4, max_length=4)
    answer: int = Field(..., ge=0, description="Index de la bonne option")

    @model_validator(mode="after")
    def _answer_in_range(self):
        if self.answer >= len(self.options):
            raise ValueError("answer must index into options")
        return self


class ShortQuestion(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    question: str = Field(..., min_length=1)
    answer: str


class StudySession(BaseModel):
    mcqs: List[MCQ] = Field(default_factory=list)
    short: List[ShortQuestion] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.mcqs and not self.short


class StudyRequest(BaseModel):
    subject: Subject
    strict: bool = Field(default=False, description="Erreur 502 si la sortie du modèle est inexploitable")


class StudyParseResult(BaseModel):
    session: StudySession
    # Diagnostic interne (None si la sortie était conforme)
    error: Optional[str] = None
