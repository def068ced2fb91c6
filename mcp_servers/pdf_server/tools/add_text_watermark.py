from typing import Annotated

import fitz  # PyMuPDF
from loguru import logger
from models.watermark import (
    COLOR,
    FONT_NAME,
    OPACITY,
    ROTATION_DEGREES,
    TEXT_SIZE,
    WatermarkPosition,
    compute_anchor,
)
from pydantic import Field
from utils.decorators import make_async_background
from utils.errors import processing_error
from utils.pdf_io import transform_pdf_file


def _draw_watermark(
    doc: fitz.Document, text: str, position: WatermarkPosition
) -> int:
    # One font object for the whole document, so it is embedded only once
    font = fitz.Font(FONT_NAME)

    # Built-in Helvetica glyphs only, never a substituted fallback font
    unsupported = sorted({c for c in text if not font.has_glyph(ord(c))})
    if unsupported:
        raise ValueError(
            f"Watermark text contains characters Helvetica cannot encode: "
            f"{''.join(unsupported)!r}"
        )

    for page in doc:
        width, height = page.rect.width, page.rect.height
        anchor = compute_anchor(position, width, height)

        # PyMuPDF measures y from the top edge
        origin = fitz.Point(anchor.x, height - anchor.y)

        writer = fitz.TextWriter(page.rect)
        writer.append(origin, text, font=font, fontsize=TEXT_SIZE)
        # morph is applied in PDF space, where positive angles turn counter-clockwise
        writer.write_text(
            page,
            color=COLOR,
            opacity=OPACITY,
            morph=(origin, fitz.Matrix(ROTATION_DEGREES)),
        )

    return doc.page_count


@make_async_background
def add_text_watermark(
    watermarkText: Annotated[
        str, Field(description="The text to add as a watermark")
    ],
    pdfPath: Annotated[str, Field(description="The path to the PDF file")],
    position: Annotated[
        WatermarkPosition,
        Field(description="The position of the watermark on the page"),
    ] = "center",
) -> str:
    """Add a text watermark to a PDF.

    Draws the text rotated 45 degrees in translucent red on every page, at
    the chosen anchor position. The file is overwritten in place.
    """
    try:
        pages = transform_pdf_file(
            pdfPath, lambda doc: _draw_watermark(doc, watermarkText, position)
        )
    except Exception as exc:
        logger.warning(f"Failed to watermark {pdfPath}: {repr(exc)}")
        return processing_error(exc)

    logger.debug(f"Watermarked {pages} page(s) of {pdfPath} at {position}")
    return "Successfully added text watermark to the PDF."
