import io
from pathlib import PurePath
from typing import Tuple

from pypdf import PdfReader
from pypdf.errors import PdfReadError

TEXT_SUFFIXES = {".txt", ".md"}


class UnsupportedFileType(ValueError):
    pass


class UnreadableFile(ValueError):
    pass


def extract_pdf_text(data: bytes) -> Tuple[str, int]:
    """
    Extrait le texte d'un PDF en mémoire.
    Renvoie (texte, nombre de pages) ; les pages sans texte donnent "".
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        text_parts = [page.extract_text() or "" for page in reader.pages]
    except PdfReadError as e:
        raise UnreadableFile(f"Unreadable PDF: {e}") from e
    return "\n".join(text_parts), len(text_parts)


def extract_text(filename: str, data: bytes) -> Tuple[str, int]:
    """
    Texte d'un fichier uploadé selon son extension (.pdf, .txt, .md).
    Pages = 0 hors PDF.
    """
    suffix = PurePath(filename).suffix.lower()
    if suffix == ".pdf":
        return extract_pdf_text(data)
    if suffix in TEXT_SUFFIXES:
        return data.decode("utf-8", errors="replace"), 0
    raise UnsupportedFileType(f"Unsupported file type: {suffix or filename}")
