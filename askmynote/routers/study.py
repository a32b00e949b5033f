from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_404_NOT_FOUND, HTTP_502_BAD_GATEWAY, HTTP_503_SERVICE_UNAVAILABLE

from askmynote.core.deps import get_study_service
from askmynote.core.errors import EmptyCorpus, GenerationError, MalformedGenerationOutput, MissingCredential
from askmynote.models.study import StudyRequest, StudySession
from askmynote.services.study_service import StudyService

router = APIRouter(prefix="/api/study", tags=["study"])


@router.post("", response_model=StudySession)
def start_study(body: StudyRequest, service: StudyService = Depends(get_study_service)):
    try:
        return service.generate(body.subject, strict=body.strict)
    except EmptyCorpus as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e))
    except MissingCredential as e:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except GenerationError as e:
        raise HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail=f"LLM error: {e}")
    except MalformedGenerationOutput as e:
        raise HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail=f"Invalid quiz JSON: {e}")
