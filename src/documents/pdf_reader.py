"""
Reading rendered PDFs back for verification.
"""
from pathlib import Path
from typing import Iterable, List, Union
from loguru import logger

import PyPDF2
from PyPDF2.errors import PdfReadError

from .document_builder import Section


def _normalize(text: str) -> str:
    return " ".join(text.split())


def extract_pdf_text(file_path: Union[str, Path]) -> str:
    """Extract text content from PDF."""
    content = ""
    try:
        with open(file_path, 'rb') as file:
            pdf_reader = PyPDF2.PdfReader(file)
            for page in pdf_reader.pages:
                content += (page.extract_text() or "") + "\n"
    except (OSError, PdfReadError) as e:
        logger.error(f"Failed to extract PDF content: {e}")
    return content


def missing_texts(file_path: Union[str, Path], sections: Iterable[Section]) -> List[str]:
    """Section texts that cannot be found in the rendered document.

    Whitespace is normalized on both sides since wrapped lines come back
    with line breaks in them.
    """
    content = _normalize(extract_pdf_text(file_path))
    missing = [s.text for s in sections if _normalize(s.text) not in content]
    if missing:
        logger.warning(f"{len(missing)} section(s) missing from {file_path}")
    return missing
