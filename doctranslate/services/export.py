# doctranslate/services/export.py
import io
from typing import List, Literal, Tuple
from xml.sax.saxutils import escape

from docx import Document as DocxDocument
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from ..languages import language_name
from ..schemas.document import Document
from ..schemas.translation import Translation
from ..utils.logging import service_logger

ExportFormat = Literal["pdf", "docx"]

MEDIA_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class NothingToExport(ValueError):
    pass


class ExportService:
    """Renders a document and its translations for download"""

    @staticmethod
    def _sections(document: Document, translations: List[Translation]) -> List[Tuple[str, str]]:
        sections = []
        if document.content:
            sections.append((f"Original ({language_name(document.source_language)})", document.content))
        for translation in translations:
            if translation.content:
                sections.append((f"Translation ({language_name(translation.language)})", translation.content))
        return sections

    def render(self, document: Document, translations: List[Translation], format: ExportFormat) -> Tuple[bytes, str]:
        """Return the rendered file and its media type"""
        sections = self._sections(document, translations)
        if not sections:
            raise NothingToExport("No text content found in document")

        if format == "pdf":
            content = self._render_pdf(document, sections)
        elif format == "docx":
            content = self._render_docx(document, sections)
        else:
            raise ValueError(f"Invalid format: {format}")

        service_logger.info("Document rendered for export", extra={
            "document_id": document.id,
            "format": format,
            "section_count": len(sections),
            "size": len(content)
        })
        return content, MEDIA_TYPES[format]

    def _render_pdf(self, document: Document, sections: List[Tuple[str, str]]) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            rightMargin=72,
            leftMargin=72,
            topMargin=72,
            bottomMargin=72
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            'CustomTitle',
            parent=styles['Heading1'],
            fontSize=16,
            spaceAfter=30
        )

        content = [Paragraph(escape(document.title), title_style)]
        for heading, text in sections:
            content.append(Paragraph(escape(heading), styles['Heading2']))
            for paragraph in text.split("\n"):
                content.append(Paragraph(escape(paragraph), styles['Normal']))
            content.append(Spacer(1, 12))

        doc.build(content)
        return buffer.getvalue()

    def _render_docx(self, document: Document, sections: List[Tuple[str, str]]) -> bytes:
        doc = DocxDocument()
        doc.add_heading(document.title, 0)

        for heading, text in sections:
            doc.add_heading(heading, level=2)
            doc.add_paragraph(text)

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()


export_service = ExportService()
