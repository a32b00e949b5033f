from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from pydantic import ValidationError

from askmynote.models.chat import Confidence
from askmynote.models.study import MCQ, ShortQuestion, StudyParseResult, StudySession

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "I'm sorry, I couldn't generate a response."

_BRACKETED = re.compile(r"\[.*?\]")
# citation = "fichier.ext:chunk" ; exclut [Confidence: HIGH] et autres annotations
_CITATION = re.compile(r"\[(?!\s*confidence\b)([^\[\]:]*\.[^\[\]:]*:[^\[\]]+)\]", re.IGNORECASE)
_CONFIDENCE = re.compile(r"confidence\W*(HIGH|MEDIUM|LOW)\b", re.IGNORECASE)


# ---------- chat ----------

def parse_chat_answer(raw: Optional[str]) -> str:
    if not raw or not raw.strip():
        return FALLBACK_ANSWER
    return raw


def speech_text(text: str) -> str:
    """
    Retire les annotations entre crochets ([notes.txt:1], [HIGH]...)
    pour qu'elles ne soient pas lues à voix haute.
    """
    return _BRACKETED.sub("", text)


def extract_citations(text: str) -> List[str]:
    seen: List[str] = []
    for m in _CITATION.finditer(text):
        c = m.group(1).strip()
        if c not in seen:
            seen.append(c)
    return seen


def extract_confidence(text: str) -> Optional[Confidence]:
    m = _CONFIDENCE.search(text)
    if not m:
        return None
    return Confidence(m.group(1).upper())


# ---------- quiz ----------

def _coerce_items(raw_items: Any, model, key: str, problems: List[str]) -> list:
    if raw_items is None:
        problems.append(f"missing '{key}'")
        return []
    if not isinstance(raw_items, list):
        problems.append(f"'{key}' is not a list")
        return []

    out = []
    for i, it in enumerate(raw_items):
        try:
            out.append(model.model_validate(it))
        except ValidationError as e:
            problems.append(f"{key}[{i}] dropped: {e.error_count()} validation error(s)")
    return out


def parse_study_session(raw: Optional[str]) -> StudyParseResult:
    """
    Parse la sortie JSON du modèle en StudySession.
    Ne lève jamais : en cas de sortie vide/invalide on renvoie une session vide
    et le diagnostic dans `error`. Les items non conformes sont ignorés un par un.
    """
    if not raw or not raw.strip():
        return StudyParseResult(session=StudySession(), error="empty generation output")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("quiz output is not valid JSON: %s", e)
        return StudyParseResult(session=StudySession(), error=f"invalid JSON: {e}")

    if not isinstance(data, dict):
        return StudyParseResult(session=StudySession(), error="JSON root is not an object")

    problems: List[str] = []
    session = StudySession(
        mcqs=_coerce_items(data.get("mcqs"), MCQ, "mcqs", problems),
        short=_coerce_items(data.get("short"), ShortQuestion, "short", problems),
    )
    if problems:
        logger.warning("quiz output partially malformed: %s", "; ".join(problems))
    return StudyParseResult(session=session, error="; ".join(problems) or None)
