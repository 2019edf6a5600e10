"""
Transient UI Feedback.

Snackbars, toasts, a global loader, confirmation dialogs and bottom
sheets. Each helper validates the context first and quietly does
nothing (or returns None) when it is missing or detached.

Helpers build declarative specs; the host renders them. Overlay
bookkeeping (active toasts, the single loader) lives in an
OverlayRegistry owned by each WidgetHelpers instance.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from smart_utils.config import Settings, get_settings
from smart_utils.errors import InvalidArgumentError
from smart_utils.utils.logger import get_logger
from smart_utils.widgets.context import Overlay, UIContext, is_valid_context

logger = get_logger(__name__)

# ARGB hex colors
BLACK_87 = "#DE000000"
BLACK_38 = "#61000000"
WHITE = "#FFFFFFFF"
SUCCESS_GREEN = "#FF43A047"
ERROR_RED = "#FFD32F2F"
INFO_BLUE = "#FF1E88E5"


# ============================================================================
# Specs
# ============================================================================

class SnackbarAction(BaseModel):
    """A button shown inside a snackbar."""

    label: str
    on_pressed: Callable[[], None]


class SnackbarSpec(BaseModel):
    """A snackbar to show at the bottom of a screen."""

    message: str
    background_color: str = BLACK_87
    text_color: str = WHITE
    duration_seconds: float = Field(..., gt=0)
    action: SnackbarAction | None = None


class ToastSpec(BaseModel):
    """A floating message drawn in the overlay."""

    message: str
    background_color: str = BLACK_87
    text_color: str = WHITE
    duration_seconds: float = Field(..., gt=0)
    bottom_offset: float = Field(..., ge=0)


class LoaderSpec(BaseModel):
    """A modal progress indicator covering the screen."""

    message: str | None = None
    barrier_color: str = BLACK_38


class ConfirmDialogSpec(BaseModel):
    """A two-button confirmation dialog. Resolves to True, False or None."""

    title: str
    message: str
    confirm_text: str = "Yes"
    cancel_text: str = "Cancel"


class BottomSheetSpec(BaseModel):
    """A modal sheet sliding up from the bottom edge."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    content: Any
    is_dismissible: bool = True
    enable_drag: bool = True
    max_height: float = Field(..., ge=0)
    background_color: str = WHITE
    border_radius: float = Field(default=16.0, ge=0)


class MessageSheetSpec(BaseModel):
    """Text-only bottom sheet content with a close button."""

    title: str
    message: str
    button_text: str = "Close"


# ============================================================================
# Overlay Bookkeeping
# ============================================================================

class OverlayEntry:
    """A spec inserted into a host overlay, removable at most once."""

    def __init__(self, spec: BaseModel) -> None:
        self.spec = spec
        self._overlay: Overlay | None = None

    @property
    def mounted(self) -> bool:
        return self._overlay is not None

    def insert_into(self, overlay: Overlay) -> None:
        overlay.insert(self)
        self._overlay = overlay

    def remove(self) -> bool:
        """Remove from the overlay. Returns False if already removed."""
        if self._overlay is None:
            return False
        overlay, self._overlay = self._overlay, None
        overlay.remove(self)
        return True


class OverlayRegistry:
    """Active toast entries and the single loader entry."""

    def __init__(self) -> None:
        self.toasts: set[OverlayEntry] = set()
        self.loader: OverlayEntry | None = None

    def clear_toasts(self) -> int:
        """Remove every active toast. Returns how many were removed."""
        entries = list(self.toasts)
        self.toasts.clear()
        return sum(1 for entry in entries if entry.remove())

    def expire_toast(self, entry: OverlayEntry) -> None:
        """Timer callback; only removes an entry that is still active."""
        if entry in self.toasts:
            self.toasts.discard(entry)
            entry.remove()


def _positive(name: str, value: float | None, default: float) -> float:
    if value is None:
        return default
    if value <= 0:
        raise InvalidArgumentError(name, value, "must be positive")
    return value


# ============================================================================
# Helpers
# ============================================================================

class WidgetHelpers:
    """
    Feedback helpers bound to one overlay registry.

    Usage:
        widgets = WidgetHelpers()
        widgets.show_loader(context, message="Saving...")
        ...
        widgets.hide_loader()
    """

    def __init__(
        self,
        registry: OverlayRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry or OverlayRegistry()
        self.settings = settings or get_settings()

    # === Snackbars ===

    def show_snackbar(
        self,
        context: UIContext | None,
        message: str,
        background_color: str = BLACK_87,
        text_color: str = WHITE,
        duration_seconds: float | None = None,
        action: SnackbarAction | None = None,
    ) -> None:
        """
        Replace the current snackbar with a new one.

        Raises:
            InvalidArgumentError: If duration_seconds is not positive
        """
        duration = _positive(
            "duration_seconds", duration_seconds, self.settings.snackbar_duration_seconds
        )
        if not is_valid_context(context):
            return
        messenger = context.scaffold_messenger()
        if messenger is None:
            logger.debug("No snackbar messenger for context, skipping snackbar")
            return

        spec = SnackbarSpec(
            message=message,
            background_color=background_color,
            text_color=text_color,
            duration_seconds=duration,
            action=action,
        )
        messenger.hide_current_snackbar()
        messenger.show_snackbar(spec)

    def show_success_snackbar(self, context: UIContext | None, message: str) -> None:
        self.show_snackbar(context, message, background_color=SUCCESS_GREEN)

    def show_error_snackbar(self, context: UIContext | None, message: str) -> None:
        self.show_snackbar(context, message, background_color=ERROR_RED)

    def show_info_snackbar(self, context: UIContext | None, message: str) -> None:
        self.show_snackbar(context, message, background_color=INFO_BLUE)

    # === Toasts ===

    def show_toast(
        self,
        context: UIContext | None,
        message: str,
        background_color: str = BLACK_87,
        text_color: str = WHITE,
        duration_seconds: float | None = None,
        bottom_offset: float | None = None,
    ) -> OverlayEntry | None:
        """
        Show a toast in the overlay, replacing any active toasts.

        The toast removes itself after its duration when an asyncio loop
        is running; otherwise it stays until the next toast or
        dismiss_all_toasts.

        Returns:
            The inserted entry, or None if nothing was shown

        Raises:
            InvalidArgumentError: If duration_seconds is not positive or
                bottom_offset is negative
        """
        duration = _positive(
            "duration_seconds", duration_seconds, self.settings.toast_duration_seconds
        )
        if bottom_offset is None:
            bottom_offset = self.settings.toast_bottom_offset
        elif bottom_offset < 0:
            raise InvalidArgumentError("bottom_offset", bottom_offset, "must be non-negative")

        if not is_valid_context(context):
            return None
        overlay = context.overlay()
        if overlay is None:
            return None

        self.registry.clear_toasts()

        spec = ToastSpec(
            message=message,
            background_color=background_color,
            text_color=text_color,
            duration_seconds=duration,
            bottom_offset=bottom_offset,
        )
        entry = OverlayEntry(spec)
        self.registry.toasts.add(entry)
        entry.insert_into(overlay)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, toast will not auto-dismiss")
        else:
            loop.call_later(spec.duration_seconds, self.registry.expire_toast, entry)

        return entry

    def dismiss_all_toasts(self, context: UIContext | None) -> None:
        """Remove every active toast. Safe when none are showing."""
        if not is_valid_context(context):
            return
        removed = self.registry.clear_toasts()
        if removed:
            logger.debug(f"Dismissed {removed} toast(s)")

    # === Loader ===

    def show_loader(self, context: UIContext | None, message: str | None = None) -> None:
        """Show the global loader. No-op while one is already showing."""
        if not is_valid_context(context):
            return
        if self.registry.loader is not None:
            return
        overlay = context.overlay()
        if overlay is None:
            return

        entry = OverlayEntry(LoaderSpec(message=message))
        entry.insert_into(overlay)
        self.registry.loader = entry

    def hide_loader(self, context: UIContext | None = None) -> None:
        """Hide the global loader. Safe to call when none is showing."""
        entry = self.registry.loader
        if entry is None:
            return
        try:
            entry.remove()
        finally:
            self.registry.loader = None

    @property
    def is_loading(self) -> bool:
        return self.registry.loader is not None

    # === Dialogs ===

    async def show_confirm_dialog(
        self,
        context: UIContext | None,
        title: str,
        message: str,
        confirm_text: str = "Yes",
        cancel_text: str = "Cancel",
    ) -> bool | None:
        """
        Ask the user to confirm.

        Returns:
            True if confirmed, False if cancelled, None if dismissed
        """
        if not is_valid_context(context):
            return None
        spec = ConfirmDialogSpec(
            title=title,
            message=message,
            confirm_text=confirm_text,
            cancel_text=cancel_text,
        )
        result = await context.show_dialog(spec)
        return None if result is None else bool(result)

    # === Bottom Sheets ===

    async def show_bottom_sheet(
        self,
        context: UIContext | None,
        content: Any,
        is_dismissible: bool = True,
        enable_drag: bool = True,
        max_height_fraction: float | None = None,
        background_color: str = WHITE,
        border_radius: float = 16.0,
    ) -> Any:
        """
        Show content in a modal bottom sheet.

        Args:
            max_height_fraction: Maximum height as a fraction of the screen
                height (0.8 means 80%)

        Returns:
            Whatever the sheet resolves with, or None

        Raises:
            InvalidArgumentError: If max_height_fraction is outside (0, 1]
        """
        fraction = _positive(
            "max_height_fraction",
            max_height_fraction,
            self.settings.bottom_sheet_max_height_fraction,
        )
        if fraction > 1:
            raise InvalidArgumentError("max_height_fraction", fraction, "must be at most 1")
        if not is_valid_context(context):
            return None
        spec = BottomSheetSpec(
            content=content,
            is_dismissible=is_dismissible,
            enable_drag=enable_drag,
            max_height=context.screen_size().height * fraction,
            background_color=background_color,
            border_radius=border_radius,
        )
        return await context.show_modal_bottom_sheet(spec)

    async def show_message_sheet(
        self,
        context: UIContext | None,
        title: str,
        message: str,
        button_text: str = "Close",
    ) -> None:
        """Show a text-only bottom sheet with a close button."""
        if not is_valid_context(context):
            return
        content = MessageSheetSpec(title=title, message=message, button_text=button_text)
        await self.show_bottom_sheet(context, content)
