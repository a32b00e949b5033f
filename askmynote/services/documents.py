from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import select, or_
from sqlalchemy.orm import Session

from askmynote.db.models import Document
from askmynote.models.subject import Subject, subject_name

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Documents par matière (lecture + ajout uniquement).
    Pas de mise à jour ni de suppression : un document uploadé est immuable.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        subject: Union[Subject, str],
        filename: str,
        content: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> int:
        doc = Document(
            subject=subject_name(subject),
            filename=filename,
            content=content or "",
            meta=metadata,
        )
        self.db.add(doc)
        self.db.commit()
        self.db.refresh(doc)
        logger.info("document %s uploaded (%s, %d chars)", doc.id, doc.subject, len(doc.content))
        return doc.id

    def list(self, subject: Union[Subject, str]) -> List[Document]:
        """
        Tous les documents de la matière, dans l'ordre d'insertion.
        """
        return list(
            self.db.execute(
                select(Document)
                .where(Document.subject == subject_name(subject))
                .order_by(Document.id)
            ).scalars().all()
        )

    def search(self, subject: Union[Subject, str], query: str) -> List[Document]:
        """
        Sous-chaîne insensible à la casse sur filename OU content.
        Requête vide → liste vide (et non "tout").
        """
        if not query:
            return []
        return list(
            self.db.execute(
                select(Document)
                .where(
                    Document.subject == subject_name(subject),
                    or_(
                        Document.filename.icontains(query, autoescape=True),
                        Document.content.icontains(query, autoescape=True),
                    ),
                )
                .order_by(Document.id)
            ).scalars().all()
        )
