"""
Module: builder.controller

Purpose:
    Orchestrate the complete sheet building pipeline.
    Load → Filter → Substitute formulas → Layout + Render → Write

Key Functions:
    - build_sheet(): Main entry point for building a sheet

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.loading: Item loading
    - builder.text: Formula substitution
    - builder.layout: Layout configuration
    - builder.output: PDF rendering and preview

Used By:
    - cheatsheet_toolkit.cli: build command
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence, Union

from cheatsheet_toolkit.core.models import SourceItem

from .config import BuilderConfig
from .layout import ConfigError, LayoutResult, RenderError
from .loading import LoaderError, load_items, select_checked
from .output import render_to_bytes, save_preview
from .text import plain_text_item

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_bytes: Generated document
        pdf_path: Where the document was written (None for in-memory builds)
        preview_path: PNG preview of page 1 (if requested)
        layout: Placement of every item
        item_count: Items placed (checked items only)
        page_count: Number of pages generated
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_sheet(Path("concepts.json"), BuilderConfig(), Path("sheet.pdf"))
        >>> print(f"Generated {result.page_count} pages with {result.item_count} items")
    """
    pdf_bytes: bytes
    pdf_path: Optional[Path]
    preview_path: Optional[Path]
    layout: LayoutResult
    item_count: int
    page_count: int
    metadata: dict
    warnings: tuple[str, ...]


def build_sheet(
    source: Union[Path, Sequence[SourceItem]],
    config: BuilderConfig,
    output_path: Optional[Path] = None,
    *,
    preview_path: Optional[Path] = None,
) -> BuildResult:
    """
    Build a sheet from start to finish.

    Pipeline:
    1. Load items (from a .json path, or use the given SourceItems)
    2. Keep checked items; fail if none remain
    3. Spell out formula symbols (plain-text mode)
    4. Lay out and render to PDF
    5. (Optional) Write the PDF and a PNG preview of page 1

    Args:
        source: Path to the item source JSON, or already-loaded items
        config: Build configuration (clamped before layout)
        output_path: Where to write the PDF (None keeps it in memory)
        preview_path: Where to write a PNG preview of the first page

    Returns:
        BuildResult with the document and layout

    Raises:
        BuildError: If any step fails
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    # 1. Load items
    if isinstance(source, Path):
        try:
            source_items = load_items(source)
        except LoaderError as e:
            raise BuildError(f"Failed to load items: {e}") from e
    else:
        source_items = list(source)

    # 2. Keep checked items
    items = select_checked(source_items)
    if not items:
        raise BuildError("Please select at least one item to include in the sheet")
    skipped = len(source_items) - len(items)
    if skipped:
        logger.info(f"Skipping {skipped} unchecked items")

    # 3. Formula substitution
    items = [plain_text_item(item, config.plain_text_formulas) for item in items]

    # 4. Layout + render
    try:
        layout_config = config.to_layout_config()
    except ConfigError as e:
        raise BuildError(f"Invalid layout settings: {e}") from e

    logger.info(
        f"Laying out {len(items)} items in {layout_config.column_count} column(s), "
        f"max {layout_config.max_items_per_page} per page"
    )
    try:
        pdf_bytes, layout = render_to_bytes(items, layout_config)
    except RenderError as e:
        raise BuildError(f"Failed to render sheet: {e}") from e
    warnings.extend(layout.warnings)

    # 5. Write outputs
    if output_path is not None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(pdf_bytes)
        except OSError as e:
            raise BuildError(f"Failed to write {output_path}: {e}") from e
        logger.info(f"Wrote {layout.page_count} pages to {output_path}")

    if preview_path is not None:
        try:
            save_preview(pdf_bytes, preview_path)
        except (OSError, ValueError) as e:
            raise BuildError(f"Failed to write preview {preview_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Sheet generation completed in {elapsed:.2f}s")

    metadata = _build_metadata(config, layout, len(items))

    return BuildResult(
        pdf_bytes=pdf_bytes,
        pdf_path=output_path,
        preview_path=preview_path,
        layout=layout,
        item_count=len(items),
        page_count=layout.page_count,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _build_metadata(config: BuilderConfig, layout: LayoutResult, item_count: int) -> dict:
    """Build metadata dictionary for the result."""
    from cheatsheet_toolkit import __version__

    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "item_count": item_count,
        "page_count": layout.page_count,
        "overflow_item_ids": list(layout.overflow_item_ids),
        "settings": config.sanitized().to_dict(),
    }
