"""Alignment and overflow policy for a single table field."""

from __future__ import annotations

from .models import ELLIPSIS, HorizontalAlign, OverflowBehaviour
from .width import clip_end, clip_start, display_width


def left_padding(align: HorizontalAlign, target_width: int, content_width: int) -> int:
    """
    Compute the spaces placed before content narrower than its column.

    Raises:
        ValueError: If ``align`` is not a HorizontalAlign member
    """
    if align is HorizontalAlign.LEFT:
        return 0
    if align is HorizontalAlign.CENTER:
        return (target_width - content_width) // 2
    if align is HorizontalAlign.RIGHT:
        return target_width - content_width
    raise ValueError(f"Unsupported alignment: {align!r}")


def clip(content: str, target_width: int, overflow: OverflowBehaviour) -> str:
    """
    Shorten ``content`` to exactly ``target_width`` columns, marking the cut with an ellipsis.

    Truncation is measured in display columns. When a wide character would
    straddle the boundary it is dropped and the gap is filled with a space.

    Raises:
        ValueError: If ``overflow`` is not an OverflowBehaviour member
    """
    ellipsis_width = display_width(ELLIPSIS)
    if target_width < ellipsis_width:
        # No room for the marker; keep whatever fits.
        if overflow is OverflowBehaviour.CLIP_LEFT:
            fragment = clip_start(content, target_width)
        elif overflow is OverflowBehaviour.CLIP_RIGHT:
            fragment = clip_end(content, target_width)
        else:
            raise ValueError(f"Unsupported overflow behaviour: {overflow!r}")
    else:
        keep = target_width - ellipsis_width
        if overflow is OverflowBehaviour.CLIP_RIGHT:
            fragment = clip_end(content, keep) + ELLIPSIS
        elif overflow is OverflowBehaviour.CLIP_LEFT:
            fragment = ELLIPSIS + clip_start(content, keep)
        else:
            raise ValueError(f"Unsupported overflow behaviour: {overflow!r}")
    return fragment + " " * (target_width - display_width(fragment))


def justify(
    content: str,
    align: HorizontalAlign,
    target_width: int,
    min_padding: int,
    overflow: OverflowBehaviour,
) -> str:
    """
    Render ``content`` as a field of ``target_width + 2 * min_padding`` columns.

    Args:
        content: Cell, header, footer or title text
        align: Placement of content narrower than the column
        target_width: Column width excluding padding
        min_padding: Spaces emitted on both sides
        overflow: Clipping policy for content wider than the column

    Returns:
        The padded (or clipped) field text
    """
    pad = " " * min_padding
    content_width = display_width(content)

    if content_width == target_width:
        body = content
    elif content_width < target_width:
        left = left_padding(align, target_width, content_width)
        right = target_width - content_width - left
        body = " " * left + content + " " * right
    else:
        body = clip(content, target_width, overflow)

    return pad + body + pad
