"""
Documents package for PDF generation.
"""
from .document_builder import DocumentBuilder, Section, SectionLevel, DEFAULT_FONT_SIZES
from .curriculum_vitae import lorem_ipsum_cv, render_cv
from .pdf_reader import extract_pdf_text, missing_texts

__all__ = [
    "DocumentBuilder", "Section", "SectionLevel", "DEFAULT_FONT_SIZES",
    "lorem_ipsum_cv", "render_cv",
    "extract_pdf_text", "missing_texts",
]
