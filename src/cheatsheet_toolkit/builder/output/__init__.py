"""
Output generation for the builder.

Contains:
- renderer: ReportLab adapter and PDF writers
- preview: PNG previews of generated pages
"""

from .renderer import ReportLabAdapter, render_to_bytes, render_to_pdf
from .preview import render_preview, save_preview

__all__ = [
    "ReportLabAdapter",
    "render_to_pdf",
    "render_to_bytes",
    "render_preview",
    "save_preview",
]
