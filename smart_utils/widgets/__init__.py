"""
Widget Helpers.

Host UI protocols, transient feedback helpers and layout queries.
"""

from smart_utils.widgets.context import (
    BoxConstraints,
    Offset,
    Orientation,
    Overlay,
    RenderBox,
    Size,
    SnackbarMessenger,
    UIContext,
    is_valid_context,
)
from smart_utils.widgets.feedback import (
    BottomSheetSpec,
    ConfirmDialogSpec,
    LoaderSpec,
    MessageSheetSpec,
    OverlayEntry,
    OverlayRegistry,
    SnackbarAction,
    SnackbarSpec,
    ToastSpec,
    WidgetHelpers,
)
from smart_utils.widgets.layout import (
    get_global_position,
    get_parent_constraints,
    get_position_in_parent,
    get_widget_size,
    parent_aspect_ratio,
    parent_height,
    parent_width,
    remaining_parent_height,
    remaining_parent_width,
)

__all__ = [
    # Host boundary
    "UIContext",
    "RenderBox",
    "Overlay",
    "SnackbarMessenger",
    "Orientation",
    "Size",
    "Offset",
    "BoxConstraints",
    "is_valid_context",
    # Feedback
    "WidgetHelpers",
    "OverlayRegistry",
    "OverlayEntry",
    "SnackbarAction",
    "SnackbarSpec",
    "ToastSpec",
    "LoaderSpec",
    "ConfirmDialogSpec",
    "BottomSheetSpec",
    "MessageSheetSpec",
    # Layout
    "parent_width",
    "parent_height",
    "remaining_parent_width",
    "remaining_parent_height",
    "get_parent_constraints",
    "parent_aspect_ratio",
    "get_global_position",
    "get_widget_size",
    "get_position_in_parent",
]
