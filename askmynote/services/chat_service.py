import logging
from typing import Union

from askmynote.core.errors import EmptyCorpus, GenerationError, MissingCredential
from askmynote.models.chat import ChatResponse, ChatTurn, Role
from askmynote.models.subject import Subject, subject_name
from askmynote.services.corpus import CorpusAssembler
from askmynote.services.generation import GenerationRequest, ResponseFormat, TextGenerator
from askmynote.services.parsing import (
    extract_citations,
    extract_confidence,
    parse_chat_answer,
    speech_text,
)
from askmynote.services.prompts import build_chat_prompt

logger = logging.getLogger(__name__)


def no_documents_message(subject: Union[Subject, str]) -> str:
    return (
        f"I don't have any documents uploaded for **{subject_name(subject)}** yet. "
        "Please upload some PDF or text files using the paperclip icon so I can help you study!"
    )


def ai_error_message(error: str) -> str:
    return f"⚠️ **AI Error:** {error}. Please try again or check your connection."


class ChatService:
    """
    Chat ancré sur les documents de la matière.
    corpus → prompt → génération → parsing. Pas de retry.
    - Aucun document : message fixe, le service de génération n'est pas appelé.
    - Erreur de génération : renvoyée dans `error` (HTTP 200), jamais levée.
    """

    def __init__(self, assembler: CorpusAssembler, generator: TextGenerator):
        self.assembler = assembler
        self.generator = generator

    def reply(self, message: str, subject: Union[Subject, str], focus_level: int = 50) -> ChatResponse:
        try:
            context = self.assembler.assemble(subject, labeled=True)
        except EmptyCorpus:
            text = no_documents_message(subject)
            return ChatResponse(
                text=text,
                speech=speech_text(text),
                turn=ChatTurn(role=Role.assistant, content=text),
            )

        req = GenerationRequest(
            subject=subject_name(subject),
            prompt_text=build_chat_prompt(subject, context, message, focus_level),
            response_format=ResponseFormat.text,
        )
        try:
            raw = self.generator.generate(req.prompt_text, req.response_format)
        except (MissingCredential, GenerationError) as e:
            logger.warning("chat generation failed for %s: %s", req.subject, e)
            return ChatResponse(
                error=str(e),
                turn=ChatTurn(role=Role.assistant, content=ai_error_message(str(e))),
            )

        text = parse_chat_answer(raw)
        return ChatResponse(
            text=text,
            speech=speech_text(text),
            citations=extract_citations(text),
            confidence=extract_confidence(text),
            turn=ChatTurn(role=Role.assistant, content=text),
        )
