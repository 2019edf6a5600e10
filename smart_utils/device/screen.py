"""
Screen Metrics.

Screen size and orientation read from a UI context. A stale context
yields None.
"""

from smart_utils.widgets.context import Orientation, UIContext, is_valid_context


def screen_width(context: UIContext | None) -> float | None:
    if not is_valid_context(context):
        return None
    return context.screen_size().width


def screen_height(context: UIContext | None) -> float | None:
    if not is_valid_context(context):
        return None
    return context.screen_size().height


def is_portrait(context: UIContext | None) -> bool | None:
    if not is_valid_context(context):
        return None
    return context.orientation() is Orientation.PORTRAIT


def is_landscape(context: UIContext | None) -> bool | None:
    if not is_valid_context(context):
        return None
    return context.orientation() is Orientation.LANDSCAPE
