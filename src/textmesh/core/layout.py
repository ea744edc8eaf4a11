"""Line layout engine.

Splits text on explicit newlines, justifies every line and yields one
pen position (cursor) per character. Lines stack downward: line i sits at
y = -i * line_height.
"""

from textmesh.config import JustifyText
from textmesh.core.metrics import char_advance, font_metrics
from textmesh.domain import LayoutCursor, LineLayout
from textmesh.io.reader import Font


def justify_offset(line_width: float, justify: JustifyText) -> float:
    """Pen start position of a line of the given width."""
    if justify == JustifyText.CENTER:
        return -line_width * 0.5
    if justify == JustifyText.RIGHT:
        return -line_width
    return 0.0


def layout_lines(font: Font, text: str, justify: JustifyText) -> list[LineLayout]:
    """Lay out text line by line.

    Every character, whitespace included, receives a cursor at the pen
    position before its own advance is applied. Empty lines produce no
    cursors but still take a line's height. The running char_index takes
    one extra step per line separator.

    Args:
        font: Parsed font
        text: Text, lines separated by "\\n"
        justify: Horizontal alignment applied to every line

    Returns:
        One LineLayout per source line; empty for empty text
    """
    if not text:
        return []

    line_height = font_metrics(font).line_height
    lines: list[LineLayout] = []
    char_index = 0

    for line_index, line in enumerate(text.split("\n")):
        advances = [char_advance(font, ch) for ch in line]
        width = sum(advances, 0.0)
        x_start = justify_offset(width, justify)
        y = -line_index * line_height

        layout = LineLayout(
            line_index=line_index,
            text=line,
            width=width,
            x_start=x_start,
            y=y,
        )

        cursor_x = x_start
        for ch, advance in zip(line, advances):
            layout.cursors.append(
                LayoutCursor(
                    character=ch,
                    line_index=line_index,
                    char_index=char_index,
                    x=cursor_x,
                    y=y,
                )
            )
            cursor_x += advance
            char_index += 1

        # Account for the newline separator
        char_index += 1
        lines.append(layout)

    return lines


def layout_text(font: Font, text: str, justify: JustifyText) -> list[LayoutCursor]:
    """Cursors of every character of text, in reading order."""
    return [cursor for line in layout_lines(font, text, justify) for cursor in line.cursors]
