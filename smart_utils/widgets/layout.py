"""
Layout Helpers.

Read-only queries against the render geometry behind a UI context.
A stale context, or one without a laid-out box, yields None.
"""

from smart_utils.widgets.context import (
    ORIGIN,
    BoxConstraints,
    Offset,
    RenderBox,
    Size,
    UIContext,
    is_valid_context,
)


def _render_box(context: UIContext | None) -> RenderBox | None:
    if not is_valid_context(context):
        return None
    return context.find_render_box()


def parent_width(context: UIContext | None, fraction: float) -> float | None:
    """
    Width as a fraction of the parent constraints.

    Falls back to the screen width when the constraints are unbounded.
    """
    if not is_valid_context(context):
        return None
    box = context.find_render_box()
    if box is not None and box.constraints.has_bounded_width:
        return box.constraints.max_width * fraction
    return context.screen_size().width * fraction


def parent_height(context: UIContext | None, fraction: float) -> float | None:
    """
    Height as a fraction of the parent constraints.

    Falls back to the screen height when the constraints are unbounded.
    """
    if not is_valid_context(context):
        return None
    box = context.find_render_box()
    if box is not None and box.constraints.has_bounded_height:
        return box.constraints.max_height * fraction
    return context.screen_size().height * fraction


def remaining_parent_width(context: UIContext | None, used_width: float) -> float | None:
    """Width left inside the parent after used_width."""
    if not is_valid_context(context):
        return None
    box = context.find_render_box()
    max_width = box.constraints.max_width if box is not None else context.screen_size().width
    return max_width - used_width


def remaining_parent_height(context: UIContext | None, used_height: float) -> float | None:
    """Height left inside the parent after used_height."""
    if not is_valid_context(context):
        return None
    box = context.find_render_box()
    max_height = box.constraints.max_height if box is not None else context.screen_size().height
    return max_height - used_height


def get_parent_constraints(context: UIContext | None) -> BoxConstraints | None:
    box = _render_box(context)
    return box.constraints if box is not None else None


def parent_aspect_ratio(context: UIContext | None) -> float | None:
    """Width / height of the parent constraints, None for a zero height."""
    constraints = get_parent_constraints(context)
    if constraints is None or constraints.max_height == 0:
        return None
    return constraints.max_width / constraints.max_height


def get_global_position(context: UIContext | None) -> Offset | None:
    """Top-left corner of the element in screen coordinates."""
    box = _render_box(context)
    if box is None or not box.has_size:
        return None
    return box.local_to_global(ORIGIN)


def get_widget_size(context: UIContext | None) -> Size | None:
    """Rendered size of the element, not just its constraints."""
    box = _render_box(context)
    if box is None or not box.has_size:
        return None
    return box.size


def get_position_in_parent(context: UIContext | None) -> Offset | None:
    """Offset of the element relative to its parent render box."""
    box = _render_box(context)
    if box is None or box.parent is None:
        return None
    parent_offset = box.parent.local_to_global(ORIGIN)
    child_offset = box.local_to_global(ORIGIN)
    return child_offset - parent_offset
