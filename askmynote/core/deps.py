from functools import lru_cache
from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from askmynote.core.config import get_settings
from askmynote.db.database import get_db
from askmynote.services.chat_service import ChatService
from askmynote.services.corpus import CorpusAssembler
from askmynote.services.documents import DocumentStore
from askmynote.services.generation import GenerationClient, TextGenerator
from askmynote.services.notes import NoteStore
from askmynote.services.study_service import StudyService


def get_settings_dep():
    return get_settings()


def get_document_store(db: Session = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db)


def get_note_store(db: Session = Depends(get_db)) -> NoteStore:
    return NoteStore(db)


@lru_cache
def _shared_generation_client(
    api_key: Optional[str],
    model: str,
    base_url: Optional[str],
    temperature: float,
    timeout: float,
) -> GenerationClient:
    # un seul client (et pool httpx) par configuration, partagé entre requêtes
    return GenerationClient(
        api_key=api_key,
        model=model,
        base_url=base_url,
        temperature=temperature,
        timeout=timeout,
    )


def get_generation_client() -> TextGenerator:
    """
    Client de génération construit depuis les settings (DI, remplaçable en test).
    """
    settings = get_settings()
    return _shared_generation_client(
        settings.OPENAI_API_KEY,
        settings.LLM_MODEL,
        settings.OPENAI_BASE_URL,
        settings.LLM_TEMPERATURE,
        settings.LLM_TIMEOUT_SECONDS,
    )


def get_chat_service(
    store: DocumentStore = Depends(get_document_store),
    generator: TextGenerator = Depends(get_generation_client),
) -> ChatService:
    return ChatService(CorpusAssembler(store), generator)


def get_study_service(
    store: DocumentStore = Depends(get_document_store),
    generator: TextGenerator = Depends(get_generation_client),
) -> StudyService:
    return StudyService(CorpusAssembler(store), generator)
