from typing import List

from fastapi import APIRouter, Depends

from askmynote.core.deps import get_note_store
from askmynote.models.notes import DeleteResponse, NoteCreate, NoteCreated, NoteOut
from askmynote.models.subject import Subject
from askmynote.services.notes import NoteStore

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("/{subject}", response_model=List[NoteOut])
def list_notes(subject: Subject, store: NoteStore = Depends(get_note_store)):
    return store.list(subject)


@router.post("", response_model=NoteCreated)
def create_note(body: NoteCreate, store: NoteStore = Depends(get_note_store)):
    return NoteCreated(id=store.insert(body.subject, body.title, body.content))


@router.delete("/{note_id}", response_model=DeleteResponse)
def delete_note(note_id: int, store: NoteStore = Depends(get_note_store)):
    store.delete(note_id)
    return DeleteResponse()
