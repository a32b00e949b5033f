from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from askmynote.models.subject import Subject


class NoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    subject: Subject
    title: str
    content: str
    created_at: datetime


class NoteCreate(BaseModel):
    subject: Subject
    title: str = Field(..., min_length=1)
    content: str = ""


class NoteCreated(BaseModel):
    id: int


class DeleteResponse(BaseModel):
    success: bool = True
