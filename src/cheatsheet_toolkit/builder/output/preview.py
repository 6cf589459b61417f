"""
Module: builder.output.preview

Purpose:
    Rasterize pages of a generated PDF for on-screen preview.

Key Functions:
    - render_preview(): Render one page of PDF bytes to a PIL image
    - save_preview(): Render one page and write it as PNG

Dependencies:
    - fitz (PyMuPDF): PDF rendering
    - PIL.Image: Image handling

Used By:
    - builder.controller: Optional preview image
    - cli: --preview option
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_DPI = 100


def render_preview(
    pdf_bytes: bytes,
    page_index: int = 0,
    dpi: int = DEFAULT_PREVIEW_DPI,
) -> Image.Image:
    """
    Render one PDF page to an RGB image.

    Args:
        pdf_bytes: Complete PDF document
        page_index: Page to render (0-indexed)
        dpi: Output resolution

    Returns:
        PIL image of the page

    Raises:
        ValueError: If the document has no such page

    Example:
        >>> image = render_preview(result.pdf_bytes, dpi=72)
        >>> image.size
        (595, 842)
    """
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        if not (0 <= page_index < doc.page_count):
            raise ValueError(f"Page {page_index} out of range (document has {doc.page_count})")
        page = doc[page_index]
        matrix = fitz.Matrix(dpi / 72.0, dpi / 72.0)
        pix = page.get_pixmap(matrix=matrix, alpha=False)
        image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)

    logger.debug(f"Rendered preview of page {page_index} at {dpi} DPI: {image.size}")
    return image


def save_preview(
    pdf_bytes: bytes,
    output_path: Path,
    page_index: int = 0,
    dpi: int = DEFAULT_PREVIEW_DPI,
) -> Path:
    """Render one page and save it as PNG. Returns the written path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image = render_preview(pdf_bytes, page_index=page_index, dpi=dpi)
    image.save(output_path, format="PNG")
    logger.info(f"Saved preview to {output_path}")
    return output_path
