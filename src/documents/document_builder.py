"""
PDF document builder for section-based documents such as a CV.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union
from xml.sax.saxutils import escape
from loguru import logger

from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer


class SectionLevel(str, Enum):
    TITLE = "title"
    HEADING = "heading"
    BODY = "body"


DEFAULT_FONT_SIZES: Dict[SectionLevel, int] = {
    SectionLevel.TITLE: 24,
    SectionLevel.HEADING: 16,
    SectionLevel.BODY: 12,
}


BULLET = "\u2022"
BULLET_WIDTH = 12


@dataclass
class Section:
    """One block of text in a document.

    ``indent`` is a left indent in points and ``space_after`` is the gap left
    after the block, in lines of the block's own font size. Bullet sections
    draw the bullet glyph in the Symbol font, outside of ``text``.
    """
    level: SectionLevel
    text: str
    indent: int = 0
    font_size: Optional[int] = None
    space_after: float = 0.0
    bullet: bool = False


class DocumentBuilder:
    """Writes an ordered list of sections to a single PDF file."""

    def __init__(self, page_size=letter, font_name: str = "Helvetica",
                 font_sizes: Optional[Dict[SectionLevel, int]] = None):
        self.page_size = page_size
        self.font_name = font_name
        self.font_sizes = dict(DEFAULT_FONT_SIZES)
        if font_sizes:
            self.font_sizes.update(font_sizes)

    def font_size_for(self, section: Section) -> int:
        if section.font_size is not None:
            return section.font_size
        return self.font_sizes[SectionLevel(section.level)]

    def style_for(self, section: Section) -> ParagraphStyle:
        """Paragraph style used to render ``section``."""
        size = self.font_size_for(section)
        level = SectionLevel(section.level)
        return ParagraphStyle(
            f"{level.value}-{size}-{section.indent}",
            fontName=self.font_name,
            fontSize=size,
            leading=size * 1.2,
            leftIndent=section.indent + (BULLET_WIDTH if section.bullet else 0),
            bulletIndent=section.indent,
            bulletFontName="Symbol",
            bulletFontSize=size,
            alignment=TA_CENTER if level is SectionLevel.TITLE else TA_LEFT,
        )

    def flowables(self, sections: Iterable[Section]) -> List:
        story = []
        for section in sections:
            style = self.style_for(section)
            bullet_text = BULLET if section.bullet else None
            story.append(Paragraph(escape(section.text), style, bulletText=bullet_text))
            if section.space_after:
                story.append(Spacer(1, style.leading * section.space_after))
        return story

    def build(self, sections: Iterable[Section], output_path: Union[str, Path]) -> Path:
        """Render ``sections`` to ``output_path``. Errors writing the file propagate."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        story = self.flowables(sections)
        count = len(story)
        doc = SimpleDocTemplate(str(output_path), pagesize=self.page_size)
        doc.build(story)

        logger.info(f"Wrote {count} flowables to {output_path}")
        return output_path
