from __future__ import annotations

from typing import List, Union

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from askmynote.db.models import Note
from askmynote.models.subject import Subject, subject_name


class NoteStore:
    def __init__(self, db: Session):
        self.db = db

    def list(self, subject: Union[Subject, str]) -> List[Note]:
        # plus récentes d'abord, id pour départager deux notes du même instant
        return list(
            self.db.execute(
                select(Note)
                .where(Note.subject == subject_name(subject))
                .order_by(Note.created_at.desc(), Note.id.desc())
            ).scalars().all()
        )

    def insert(self, subject: Union[Subject, str], title: str, content: str) -> int:
        note = Note(subject=subject_name(subject), title=title, content=content or "")
        self.db.add(note)
        self.db.commit()
        self.db.refresh(note)
        return note.id

    def delete(self, note_id: int) -> None:
        """
        Supprime la note ; no-op si l'id n'existe pas.
        """
        self.db.execute(delete(Note).where(Note.id == note_id))
        self.db.commit()
