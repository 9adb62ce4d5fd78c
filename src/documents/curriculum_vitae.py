"""
Fixed-layout sample curriculum vitae.
"""
from pathlib import Path
from typing import List, Union

from .document_builder import DocumentBuilder, Section, SectionLevel

INDENT = 20


def _heading(text: str) -> Section:
    return Section(SectionLevel.HEADING, text, space_after=0.5)


def _body(text: str, indent: int = 0, space_after: float = 0.0) -> Section:
    return Section(SectionLevel.BODY, text, indent=indent, space_after=space_after)


def _bullet(text: str, space_after: float = 0.0) -> Section:
    return Section(SectionLevel.BODY, text, space_after=space_after, bullet=True)


def lorem_ipsum_cv() -> List[Section]:
    """Sections of the placeholder CV used as a test attachment."""
    return [
        Section(SectionLevel.TITLE, "Curriculum Vitae", space_after=1),

        _heading("Persoonlijke Gegevens"),
        _body("Naam: Lorem van Ipsum"),
        _body("Adres: Dorpstraat 123"),
        _body("Postcode: 1234 AB"),
        _body("Woonplaats: Amsterdam"),
        _body("Geboortedatum: 1 januari 1990"),
        _body("E-mail: lorem.ipsum@email.nl"),
        _body("Telefoon: +31 6 12345678", space_after=1),

        _heading("Werkervaring"),
        _body("2018 - heden"),
        _body("Senior Lorem Ipsum Specialist", INDENT),
        _body("Ipsum Solutions B.V., Rotterdam", INDENT),
        _body("Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
              "incididunt ut labore et dolore magna aliqua.", INDENT, space_after=1),
        _body("2015 - 2018"),
        _body("Junior Lorem Developer", INDENT),
        _body("Dutch Lorem Corp., Den Haag", INDENT),
        _body("Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip "
              "ex ea commodo consequat.", INDENT, space_after=1),

        _heading("Opleiding"),
        _body("2010 - 2015"),
        _body("MSc Lorem Ipsum Studies", INDENT),
        _body("Universiteit van Amsterdam", INDENT),
        _body("Specialisatie in dolor sit amet methodologie", INDENT, space_after=1),
        _body("2006 - 2010"),
        _body("Bachelor Ipsum Technologie", INDENT),
        _body("Hogeschool van Rotterdam", INDENT, space_after=1),

        _heading("Vaardigheden"),
        _bullet("Lorem Ipsum Development"),
        _bullet("Dolor Sit Amet Management"),
        _bullet("Consectetur Analysis"),
        _bullet("Adipiscing Project Management", space_after=1),

        _heading("Talen"),
        _body("Nederlands: Moedertaal"),
        _body("Engels: Vloeiend"),
        _body("Duits: Goed", space_after=1),
    ]


def render_cv(output_path: Union[str, Path], builder: DocumentBuilder = None) -> Path:
    builder = builder or DocumentBuilder()
    return builder.build(lorem_ipsum_cv(), output_path)
