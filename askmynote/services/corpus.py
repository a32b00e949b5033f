from __future__ import annotations

from typing import Iterable, Union

from askmynote.core.errors import EmptyCorpus
from askmynote.db.models import Document
from askmynote.models.subject import Subject, subject_name
from askmynote.services.documents import DocumentStore

CHAT_SEPARATOR = "\n\n---\n\n"
QUIZ_SEPARATOR = "\n\n"


def format_labeled(documents: Iterable[Document]) -> str:
    """Contexte du chat : 'File: <nom>\\nContent: <texte>' séparés par '---'."""
    return CHAT_SEPARATOR.join(f"File: {d.filename}\nContent: {d.content}" for d in documents)


def format_raw(documents: Iterable[Document]) -> str:
    """Contexte du quiz : contenus bruts, sans nom de fichier."""
    return QUIZ_SEPARATOR.join(d.content for d in documents)


class CorpusAssembler:
    def __init__(self, store: DocumentStore):
        self.store = store

    def assemble(self, subject: Union[Subject, str], labeled: bool = True) -> str:
        """
        Concatène tous les documents de la matière (ordre d'insertion).
        Lève EmptyCorpus s'il n'y en a aucun : un corpus vide de documents
        n'est pas la même chose qu'un document sans texte.
        """
        docs = self.store.list(subject)
        if not docs:
            raise EmptyCorpus(subject_name(subject))
        return format_labeled(docs) if labeled else format_raw(docs)
