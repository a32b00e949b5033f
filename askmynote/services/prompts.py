from typing import Union

from askmynote.models.subject import Subject, subject_name

ASSISTANT_NAME = "AskmyNote"

SIMPLE_TONE = "Use extremely simple words, short sentences, and basic analogies."
TECHNICAL_TONE = "Provide deep technical details, complex comparisons, and advanced concepts."
ACADEMIC_TONE = "Use a standard academic tone."


def tone_for_focus(focus_level: int) -> str:
    """
    Registre de réponse selon le niveau de concentration (0-100).
    """
    if not 0 <= focus_level <= 100:
        raise ValueError(f"focus_level must be between 0 and 100, got {focus_level}")
    if focus_level < 40:
        return SIMPLE_TONE
    if focus_level > 70:
        return TECHNICAL_TONE
    return ACADEMIC_TONE


def build_chat_prompt(subject: Union[Subject, str], context: str, question: str, focus_level: int) -> str:
    name = subject_name(subject)
    system = (
        f"You are {ASSISTANT_NAME}, a specialist in {name}.\n"
        "Answer ONLY from the evidence provided in the context.\n"
        f'If the answer is not in the context, say "Not found in {name}".\n'
        "\n"
        "CRITICAL FORMATTING:\n"
        '1. Every answer must cite the source as "filename:chunk".\n'
        "2. Provide a Confidence level: [HIGH/MEDIUM/LOW].\n"
        "3. Include exactly 3 relevant snippets from the text.\n"
        "\n"
        f"ADAPTATION (focus level {focus_level}/100):\n"
        f"- {tone_for_focus(focus_level)}"
    )
    return f"System: {system}\n\nContext:\n{context}\n\nQuestion: {question}"


def build_study_prompt(subject: Union[Subject, str], context: str) -> str:
    name = subject_name(subject)
    instructions = (
        f"Based on the following content for {name}, generate:\n"
        "1. Exactly 5 Multiple Choice Questions (MCQs) with 4 options each and the index of the correct option.\n"
        "2. Exactly 3 Short Answer Questions.\n"
        "\n"
        "Format as JSON:\n"
        "{\n"
        '  "mcqs": [{"question": "", "options": ["", "", "", ""], "answer": index}],\n'
        '  "short": [{"question": "", "answer": ""}]\n'
        "}"
    )
    return f"Context:\n{context}\n\n{instructions}"
