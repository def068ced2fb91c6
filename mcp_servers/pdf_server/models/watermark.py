from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

WatermarkPosition = Literal[
    "center",
    "top",
    "bottom",
    "topLeft",
    "topRight",
    "bottomLeft",
    "bottomRight",
]

WATERMARK_POSITIONS: tuple[str, ...] = get_args(WatermarkPosition)

# Drawing constants, in PDF points
TEXT_SIZE = 50
PADDING = 50
# Rough rendered width of the text; centered anchors shift left by half of it
APPROX_TEXT_WIDTH = 300
ROTATION_DEGREES = 45
COLOR = (1.0, 0.0, 0.0)
OPACITY = 0.8
FONT_NAME = "helv"


class Anchor(BaseModel):
    """Watermark origin in PDF user space (origin at the bottom-left corner)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., description="Distance from the left page edge, in points.")
    y: float = Field(
        ..., description="Distance from the bottom page edge, in points."
    )


def compute_anchor(position: WatermarkPosition, width: float, height: float) -> Anchor:
    """Return the watermark origin for a page of the given size.

    Edge and corner positions sit ``PADDING`` points inside the page boundary;
    the bottom row also clears the text height. Horizontally centered
    positions start half the approximate text width left of the middle.
    """
    centered_x = width / 2 - APPROX_TEXT_WIDTH / 2
    right_x = width - APPROX_TEXT_WIDTH
    top_y = height - PADDING
    bottom_y = PADDING + TEXT_SIZE

    match position:
        case "center":
            return Anchor(x=centered_x, y=height / 2)
        case "top":
            return Anchor(x=centered_x, y=top_y)
        case "bottom":
            return Anchor(x=centered_x, y=bottom_y)
        case "topLeft":
            return Anchor(x=PADDING, y=top_y)
        case "topRight":
            return Anchor(x=right_x, y=top_y)
        case "bottomLeft":
            return Anchor(x=PADDING, y=bottom_y)
        case "bottomRight":
            return Anchor(x=right_x, y=bottom_y)
        case _:
            raise ValueError(
                f"Unknown position: {position}. Valid: {', '.join(WATERMARK_POSITIONS)}"
            )
