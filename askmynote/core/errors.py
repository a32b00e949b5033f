from typing import Optional


class AskMyNoteError(Exception):
    """Erreur de base du pipeline (corpus, prompt, génération, parsing)."""


class EmptyCorpus(AskMyNoteError):
    """Aucun document uploadé pour la matière."""

    def __init__(self, subject: str, message: Optional[str] = None):
        self.subject = subject
        super().__init__(message or f"No documents found for {subject}.")


class MissingCredential(AskMyNoteError):
    """Pas de clé API configurée pour le service de génération."""

    def __init__(self, message: str = "Generation API key is missing. Set OPENAI_API_KEY in the environment or .env file."):
        super().__init__(message)


class GenerationError(AskMyNoteError):
    """L'appel distant a échoué (erreur API, réseau ou timeout)."""


class MalformedGenerationOutput(AskMyNoteError):
    """Sortie du modèle inexploitable pour un quiz (levée en mode strict uniquement)."""

    def __init__(self, message: str, raw: str = ""):
        self.raw = raw
        super().__init__(message)
