import logging
from typing import Union

from askmynote.core.errors import EmptyCorpus, MalformedGenerationOutput
from askmynote.models.study import StudyParseResult, StudySession
from askmynote.models.subject import Subject, subject_name
from askmynote.services.corpus import CorpusAssembler
from askmynote.services.generation import GenerationRequest, ResponseFormat, TextGenerator
from askmynote.services.parsing import parse_study_session
from askmynote.services.prompts import build_study_prompt

logger = logging.getLogger(__name__)

NO_DOCUMENTS_ERROR = "No documents found for this subject. Please upload materials first."


class StudyService:
    def __init__(self, assembler: CorpusAssembler, generator: TextGenerator):
        self.assembler = assembler
        self.generator = generator

    def generate_detailed(self, subject: Union[Subject, str]) -> StudyParseResult:
        """
        Génère un quiz (5 QCM + 3 questions courtes) et renvoie aussi le diagnostic de parsing.
        Lève EmptyCorpus avant tout appel réseau s'il n'y a aucun document.
        """
        try:
            context = self.assembler.assemble(subject, labeled=False)
        except EmptyCorpus as e:
            raise EmptyCorpus(e.subject, NO_DOCUMENTS_ERROR) from None

        req = GenerationRequest(
            subject=subject_name(subject),
            prompt_text=build_study_prompt(subject, context),
            response_format=ResponseFormat.json,
        )
        raw = self.generator.generate(req.prompt_text, req.response_format)
        result = parse_study_session(raw)
        logger.info(
            "study session for %s: %d mcqs, %d short",
            req.subject, len(result.session.mcqs), len(result.session.short),
        )
        return result

    def generate(self, subject: Union[Subject, str], strict: bool = False) -> StudySession:
        result = self.generate_detailed(subject)
        if strict and result.error:
            raise MalformedGenerationOutput(result.error)
        return result.session
