"""
PDF Encoding

Turns a RenderedDocument (résumé markup + style preset) into a paginated PDF
with a real text layer, using reportlab platypus.

Each <entry> becomes a KeepTogether group, and a section heading is kept
with its first entry. This asks the layout engine not to split an entry
across pages; an entry taller than a page is still split.
"""

import base64
import os
import xml.etree.ElementTree as ET
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape

from dotenv import load_dotenv
from omegaconf import OmegaConf
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import (
    HRFlowable,
    Image,
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from vitae.contexts.rendering.logger import _log_warning, log_pdf_encoded
from vitae.contexts.rendering.renderer import RenderedDocument

load_dotenv()
DEFAULT_EXPORT_CONFIG_PATH = Path(__file__).parent / "export_defaults.yaml"
EXPORT_CONFIG_PATH = Path(os.getenv("VITAE_EXPORT_CONFIG_PATH", str(DEFAULT_EXPORT_CONFIG_PATH)))

PAGE_SIZES = {"letter": LETTER, "a4": A4}
ALIGNMENTS = {"left": TA_LEFT, "center": TA_CENTER, "right": TA_RIGHT}


def load_export_config(config_path: Path = None) -> Dict[str, Any]:
    """Load export page settings (see export_defaults.yaml)."""
    if config_path is None:
        config_path = EXPORT_CONFIG_PATH
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def decode_data_url(data_url: str) -> bytes:
    """
    Decode a base64 data URL ('data:image/png;base64,...') to raw bytes.

    Raises:
        ValueError: If the string is not a base64 data URL
    """
    header, _, payload = data_url.partition(",")
    if not header.startswith("data:") or ";base64" not in header or not payload:
        raise ValueError("Photo is not a base64 data URL")
    return base64.b64decode(payload)


def _inner_markup(element: ET.Element) -> str:
    """Paragraph markup of an element's content (text plus child tags)."""
    parts = [escape(element.text or "")]
    for child in element:
        parts.append(ET.tostring(child, encoding="unicode"))
    return "".join(parts).strip()


def build_styles(style: Dict[str, Any]) -> Dict[str, ParagraphStyle]:
    """
    Build paragraph styles from a template style preset.

    Args:
        style: Preset dict with fonts, sizes, colors and layout keys

    Returns:
        Dict of style name -> ParagraphStyle
    """
    fonts, sizes, palette, layout = style["fonts"], style["sizes"], style["colors"], style["layout"]

    text = colors.HexColor(palette["text"])
    accent = colors.HexColor(palette["accent"])
    muted = colors.HexColor(palette["muted"])
    header_text = colors.HexColor(palette["header_text"])
    contact_color = header_text if palette.get("header_band") else muted

    body = ParagraphStyle(
        "body",
        fontName=fonts["body"],
        fontSize=sizes["body"],
        leading=sizes["body"] * 1.35,
        textColor=text,
    )

    return {
        "name": ParagraphStyle(
            "name",
            fontName=fonts["heading"],
            fontSize=sizes["name"],
            leading=sizes["name"] * 1.2,
            textColor=header_text,
            spaceAfter=2,
        ),
        "headline": ParagraphStyle(
            "headline",
            fontName=fonts["body"],
            fontSize=sizes["headline"],
            leading=sizes["headline"] * 1.3,
            textColor=header_text,
        ),
        "contact": ParagraphStyle(
            "contact",
            fontName=fonts["body"],
            fontSize=sizes["small"],
            leading=sizes["small"] * 1.4,
            textColor=contact_color,
        ),
        "heading": ParagraphStyle(
            "heading",
            fontName=fonts["heading"],
            fontSize=sizes["heading"],
            leading=sizes["heading"] * 1.3,
            textColor=accent,
            spaceBefore=layout["section_space"],
            spaceAfter=2,
            keepWithNext=1,
        ),
        "entry_title": ParagraphStyle(
            "entry_title",
            parent=body,
            fontName=fonts["heading"],
            fontSize=sizes["entry_title"],
            leading=sizes["entry_title"] * 1.3,
        ),
        "entry_dates": ParagraphStyle(
            "entry_dates",
            parent=body,
            fontSize=sizes["small"],
            textColor=muted,
            alignment=TA_RIGHT,
        ),
        "entry_meta": ParagraphStyle("entry_meta", parent=body, textColor=muted),
        "body": body,
        "bullet": ParagraphStyle(
            "bullet",
            parent=body,
            leftIndent=layout["bullet_indent"],
            bulletIndent=0,
        ),
        "small": ParagraphStyle(
            "small",
            parent=body,
            fontSize=sizes["small"],
            leading=sizes["small"] * 1.35,
            textColor=muted,
        ),
        "footer": ParagraphStyle(
            "footer",
            parent=body,
            fontSize=sizes["small"],
            textColor=muted,
            alignment=TA_CENTER,
        ),
    }


class PDFEncoder:
    """
    Encodes rendered résumé markup as PDF bytes.

    Args:
        config: Export settings (default: load_export_config())
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else load_export_config()
        pdf_config = self.config["pdf"]
        self.page_size = PAGE_SIZES[pdf_config["page_size"].lower()]
        self.margin = pdf_config["margin"]
        self.invariant = bool(pdf_config.get("invariant", True))
        self.bullet_char = pdf_config.get("bullet_char", "–")

    @property
    def content_width(self) -> float:
        return self.page_size[0] - 2 * self.margin

    def encode(self, document: RenderedDocument) -> bytes:
        """
        Encode one rendered document.

        Args:
            document: Representation produced by ResumeRenderer

        Returns:
            PDF bytes

        Raises:
            xml.etree.ElementTree.ParseError: If the markup is malformed
            ValueError: If an embedded photo cannot be decoded
        """
        root = ET.fromstring(document.markup)
        styles = build_styles(document.style)

        story = []
        author = ""
        for element in root:
            if element.tag == "header":
                author = element.findtext("name", default="").strip()
                story.extend(self._header(element, document, styles))
            elif element.tag == "section":
                story.extend(self._section(element, document.style, styles))
            elif element.tag == "footer":
                story.append(Spacer(1, 12))
                story.append(Paragraph(_inner_markup(element), styles["footer"]))
            else:
                _log_warning(f"Ignoring unknown markup element <{element.tag}>")

        buffer = BytesIO()
        pdf = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            leftMargin=self.margin,
            rightMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin,
            title=f"{author} Resume" if author else "Resume",
            author=author,
            creator="vitae",
            invariant=1 if self.invariant else 0,
        )
        pdf.build(story)

        content = buffer.getvalue()
        log_pdf_encoded(document.element_id, len(story), len(content))
        return content

    # =========================================================================
    # ELEMENT BUILDERS
    # =========================================================================

    def _line(self, element: ET.Element, styles: Dict[str, ParagraphStyle], bullet: bool = False):
        markup = _inner_markup(element)
        if not markup:
            return None
        if bullet:
            return Paragraph(markup, styles["bullet"], bulletText=self.bullet_char)
        return Paragraph(markup, styles.get(element.get("style", "body"), styles["body"]))

    def _split(self, element: ET.Element, styles: Dict[str, ParagraphStyle]) -> Table:
        left_style = styles.get(element.get("style", "entry_title"), styles["entry_title"])
        right_style = styles.get(element.get("right-style", "entry_dates"), styles["entry_dates"])
        left = element.find("left")
        right = element.find("right")

        row = [
            Paragraph(_inner_markup(left) if left is not None else "", left_style),
            Paragraph(_inner_markup(right) if right is not None else "", right_style),
        ]
        table = Table([row], colWidths=[self.content_width * 0.7, self.content_width * 0.3])
        table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "BOTTOM"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                    ("TOPPADDING", (0, 0), (-1, -1), 0),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
                ]
            )
        )
        return table

    def _block(self, elements, styles: Dict[str, ParagraphStyle]) -> List:
        flowables = []
        for element in elements:
            if element.tag == "split":
                flowables.append(self._split(element, styles))
            elif element.tag in ("line", "bullet"):
                flowable = self._line(element, styles, bullet=element.tag == "bullet")
                if flowable is not None:
                    flowables.append(flowable)
            else:
                _log_warning(f"Ignoring unknown markup element <{element.tag}>")
        return flowables

    def _header(self, element: ET.Element, document: RenderedDocument, styles: Dict[str, ParagraphStyle]) -> List:
        align = ALIGNMENTS.get(element.get("align", "center"), TA_CENTER)
        aligned = {
            key: ParagraphStyle(f"{key}_header", parent=styles[key], alignment=align)
            for key in ("name", "headline", "contact")
        }

        paragraphs = []
        has_photo = False
        for child in element:
            if child.tag == "photo":
                has_photo = document.photo is not None
            elif child.tag == "name":
                paragraphs.append(Paragraph(_inner_markup(child), aligned["name"]))
            elif child.tag == "line":
                style = aligned.get(child.get("style", "contact"), aligned["contact"])
                paragraphs.append(Paragraph(_inner_markup(child), style))

        layout = document.style["layout"]
        band = document.style["colors"].get("header_band")

        inner_width = self.content_width - (24 if band else 0)
        if has_photo:
            size = layout["photo_size"]
            photo = Image(BytesIO(decode_data_url(document.photo)), width=size, height=size, kind="proportional")
            content = Table(
                [[photo, paragraphs]],
                colWidths=[size + 12, inner_width - size - 12],
            )
            content.setStyle(
                TableStyle(
                    [
                        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                        ("LEFTPADDING", (0, 0), (-1, -1), 0),
                        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                    ]
                )
            )
            header = [content]
        else:
            header = paragraphs

        if band:
            banded = Table([[header]], colWidths=[self.content_width])
            banded.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor(band)),
                        ("LEFTPADDING", (0, 0), (-1, -1), 12),
                        ("RIGHTPADDING", (0, 0), (-1, -1), 12),
                        ("TOPPADDING", (0, 0), (-1, -1), 12),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 12),
                    ]
                )
            )
            header = [banded]

        return header + [Spacer(1, 6)]

    def _section(self, element: ET.Element, style: Dict[str, Any], styles: Dict[str, ParagraphStyle]) -> List:
        layout = style["layout"]
        title = element.get("title", "")
        if layout.get("heading_uppercase"):
            title = title.upper()

        lead = [Paragraph(escape(title), styles["heading"])]
        if layout.get("heading_rule"):
            lead.append(
                HRFlowable(
                    width="100%",
                    thickness=0.8,
                    color=colors.HexColor(style["colors"]["accent"]),
                    spaceBefore=1,
                    spaceAfter=4,
                )
            )

        groups = []
        loose = []
        for child in element:
            if child.tag == "entry":
                if loose:
                    groups.append(loose)
                    loose = []
                entry = self._block(list(child), styles)
                entry.append(Spacer(1, layout["entry_space"]))
                groups.append(entry)
            else:
                loose.extend(self._block([child], styles))
        if loose:
            groups.append(loose)

        # A section with no content is left out, heading included
        if not groups:
            return []

        # Heading travels with the first group so it never ends a page alone
        flowables = [KeepTogether(lead + groups[0])]
        flowables.extend(KeepTogether(group) for group in groups[1:])
        return flowables


def encode_pdf(document: RenderedDocument, config: Optional[Dict[str, Any]] = None) -> bytes:
    """Encode a rendered document as PDF bytes with default or given settings."""
    return PDFEncoder(config).encode(document)
