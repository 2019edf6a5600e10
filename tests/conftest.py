"""
Pytest Configuration and Fixtures.

Host UI objects are small in-memory fakes that record what the helpers
hand them. Everything else uses the real library code.
"""

import io
from typing import Any

import pytest
from rich.console import Console

from smart_utils.config import Settings
from smart_utils.widgets.context import (
    BoxConstraints,
    Offset,
    Orientation,
    Size,
)


# ============================================================================
# Fake Host UI
# ============================================================================

class FakeRenderBox:
    """Render box with fixed geometry."""

    def __init__(
        self,
        constraints: BoxConstraints | None = None,
        size: Size | None = None,
        origin: Offset = Offset(0.0, 0.0),
        parent: "FakeRenderBox | None" = None,
    ) -> None:
        self.constraints = constraints or BoxConstraints()
        self._size = size
        self.origin = origin
        self.parent = parent

    @property
    def has_size(self) -> bool:
        return self._size is not None

    @property
    def size(self) -> Size:
        assert self._size is not None
        return self._size

    def local_to_global(self, point: Offset) -> Offset:
        return Offset(self.origin.dx + point.dx, self.origin.dy + point.dy)


class FakeOverlay:
    """Overlay that records inserted entries."""

    def __init__(self) -> None:
        self.entries: list[Any] = []
        self.insert_count = 0

    def insert(self, entry: Any) -> None:
        self.entries.append(entry)
        self.insert_count += 1

    def remove(self, entry: Any) -> None:
        self.entries.remove(entry)


class FakeMessenger:
    """Snackbar messenger that records shown specs."""

    def __init__(self) -> None:
        self.shown: list[Any] = []
        self.hide_count = 0

    def hide_current_snackbar(self) -> None:
        self.hide_count += 1

    def show_snackbar(self, spec: Any) -> None:
        self.shown.append(spec)


class FakeContext:
    """A UI context whose capabilities can be switched off per test."""

    def __init__(
        self,
        screen: Size = Size(400.0, 800.0),
        orientation: Orientation = Orientation.PORTRAIT,
        render_box: FakeRenderBox | None = None,
        overlay: FakeOverlay | None = None,
        messenger: FakeMessenger | None = None,
        dialog_result: Any = None,
        sheet_result: Any = None,
    ) -> None:
        self.attached = True
        self.screen = screen
        self._orientation = orientation
        self.render_box = render_box
        self._overlay = overlay
        self.messenger = messenger
        self.dialog_result = dialog_result
        self.sheet_result = sheet_result
        self.dialogs: list[Any] = []
        self.sheets: list[Any] = []

    def is_attached(self) -> bool:
        return self.attached

    def screen_size(self) -> Size:
        return self.screen

    def orientation(self) -> Orientation:
        return self._orientation

    def find_render_box(self) -> FakeRenderBox | None:
        return self.render_box

    def overlay(self) -> FakeOverlay | None:
        return self._overlay

    def scaffold_messenger(self) -> FakeMessenger | None:
        return self.messenger

    async def show_dialog(self, spec: Any) -> Any:
        self.dialogs.append(spec)
        return self.dialog_result

    async def show_modal_bottom_sheet(self, spec: Any) -> Any:
        self.sheets.append(spec)
        return self.sheet_result


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring the environment file."""
    return Settings(_env_file=None)


@pytest.fixture
def overlay() -> FakeOverlay:
    return FakeOverlay()


@pytest.fixture
def messenger() -> FakeMessenger:
    return FakeMessenger()


@pytest.fixture
def context(overlay: FakeOverlay, messenger: FakeMessenger) -> FakeContext:
    """An attached context with an overlay and a snackbar messenger."""
    return FakeContext(overlay=overlay, messenger=messenger)


@pytest.fixture
def detached_context(overlay: FakeOverlay, messenger: FakeMessenger) -> FakeContext:
    """A context that has been removed from the UI tree."""
    ctx = FakeContext(overlay=overlay, messenger=messenger)
    ctx.attached = False
    return ctx


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """A color-capable console writing into memory."""
    return Console(
        file=console_buffer,
        force_terminal=True,
        color_system="standard",
        width=200,
        highlight=False,
    )


class DisposedContext(FakeContext):
    """A context whose attachment check fails, as after host teardown."""

    def is_attached(self) -> bool:
        raise RuntimeError("element has been disposed")
