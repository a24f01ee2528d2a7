"""
Dokument-Aufbau hinter einer kleinen Schnittstelle.

Der Export kennt nur DocumentBuilder (Überschrift, Absatz, Liste, Tabelle);
DocxBuilder erzeugt daraus ein Word-Dokument via python-docx.
"""

from __future__ import annotations

import io
from typing import Optional, Protocol, Sequence

from docx import Document
from docx.shared import Pt

DOCX_MIMETYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class DocumentBuilder(Protocol):
    extension: str
    mimetype: str

    def add_title(self, text: str) -> None: ...

    def add_heading(self, text: str, level: int = 1, space_after: Optional[int] = None) -> None: ...

    def add_paragraph(self, text: str, bold: bool = False, space_after: Optional[int] = None) -> None: ...

    def add_block(self, lines: Sequence[str], emphasize_first: bool = False) -> None: ...

    def add_list(self, items: Sequence[str], level: int = 0) -> None: ...

    def add_table(self, header: Sequence[str], rows: Sequence[Sequence[str]]) -> None: ...

    def to_bytes(self) -> bytes: ...


class DocxBuilder:
    """python-docx implementation; `space_after` is given in points."""

    extension = "docx"
    mimetype = DOCX_MIMETYPE

    def __init__(self) -> None:
        self._doc = Document()

    def add_title(self, text: str) -> None:
        # level 0 = Formatvorlage "Title"
        self._doc.add_heading(text, level=0)

    def add_heading(self, text: str, level: int = 1, space_after: Optional[int] = None) -> None:
        p = self._doc.add_heading(text, level=level)
        if space_after is not None:
            p.paragraph_format.space_after = Pt(space_after)

    def add_paragraph(self, text: str, bold: bool = False, space_after: Optional[int] = None) -> None:
        p = self._doc.add_paragraph()
        run = p.add_run(text)
        run.bold = bold
        if space_after is not None:
            p.paragraph_format.space_after = Pt(space_after)

    def add_block(self, lines: Sequence[str], emphasize_first: bool = False) -> None:
        """Ein Absatz, Zeilen durch Umbrüche getrennt."""
        p = self._doc.add_paragraph()
        for i, line in enumerate(lines):
            run = p.add_run(line)
            if i == 0 and emphasize_first:
                run.bold = True
            if i < len(lines) - 1:
                run.add_break()

    def add_list(self, items: Sequence[str], level: int = 0) -> None:
        style = "List Bullet" if level == 0 else f"List Bullet {level + 1}"
        for item in items:
            self._doc.add_paragraph(item, style=style)

    def add_table(self, header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        table = self._doc.add_table(rows=1, cols=len(header))
        table.style = "Table Grid"
        for cell, text in zip(table.rows[0].cells, header):
            cell.text = text
        for row in rows:
            cells = table.add_row().cells
            for cell, text in zip(cells, row):
                cell.text = text

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self._doc.save(buf)
        return buf.getvalue()
