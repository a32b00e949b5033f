from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from askmynote.models.subject import Subject


class DocumentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    filename: str
    content: str


class UploadRequest(BaseModel):
    subject: Subject
    filename: str = Field(..., min_length=1, description="Nom du fichier d'origine")
    content: str = Field(default="", description="Texte déjà extrait côté client")
    metadata: Optional[Dict[str, Any]] = None


class UploadResponse(BaseModel):
    success: bool = True
    id: int


class FileUploadResponse(BaseModel):
    success: bool = True
    id: int
    filename: str
    pages: int = Field(..., ge=0, description="Pages détectées (0 hors PDF)")
