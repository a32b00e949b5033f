from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from starlette.status import (
    HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    HTTP_422_UNPROCESSABLE_ENTITY,
)

from askmynote.core.deps import get_document_store, get_settings_dep
from askmynote.models.documents import DocumentOut, FileUploadResponse, UploadRequest, UploadResponse
from askmynote.models.subject import Subject
from askmynote.services.documents import DocumentStore
from askmynote.utils.pdf_extract import UnreadableFile, UnsupportedFileType, extract_text

router = APIRouter(prefix="/api", tags=["documents"])


@router.post("/upload", response_model=UploadResponse)
def upload(body: UploadRequest, store: DocumentStore = Depends(get_document_store)):
    doc_id = store.insert(body.subject, body.filename, body.content, body.metadata)
    return UploadResponse(id=doc_id)


@router.post("/upload/file", response_model=FileUploadResponse)
def upload_file(
    subject: Subject = Form(...),
    file: UploadFile = File(...),
    store: DocumentStore = Depends(get_document_store),
    settings = Depends(get_settings_dep),
):
    max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
    data = file.file.read()
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large (max {settings.MAX_UPLOAD_MB} MB)",
        )

    filename = file.filename or "upload"
    try:
        text, pages = extract_text(filename, data)
    except UnsupportedFileType as e:
        raise HTTPException(status_code=HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    except UnreadableFile as e:
        raise HTTPException(status_code=HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    meta = {"pages": pages} if pages else None
    doc_id = store.insert(subject, filename, text, meta)
    return FileUploadResponse(id=doc_id, filename=filename, pages=pages)


@router.get("/documents/{subject}", response_model=List[DocumentOut])
def list_documents(subject: Subject, store: DocumentStore = Depends(get_document_store)):
    return store.list(subject)


@router.get("/search", response_model=List[DocumentOut])
def search(
    subject: Subject,
    q: Optional[str] = Query(default=None),
    store: DocumentStore = Depends(get_document_store),
):
    if not q:
        return []
    return store.search(subject, q)
