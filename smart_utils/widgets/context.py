"""
Host UI Boundary.

Protocols describing the small set of capabilities the helpers need
from a UI framework, plus the geometry value types it reports.

A host adapts its own context/element object to UIContext. Helpers
never touch rendering; they only query geometry and hand declarative
specs to the host.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from smart_utils.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Geometry
# ============================================================================


class Orientation(str, Enum):
    """Screen orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class Size:
    """Width and height in logical pixels."""

    width: float
    height: float


@dataclass(frozen=True)
class Offset:
    """A 2D position in logical pixels."""

    dx: float
    dy: float

    def __sub__(self, other: "Offset") -> "Offset":
        return Offset(self.dx - other.dx, self.dy - other.dy)


ORIGIN = Offset(0.0, 0.0)


@dataclass(frozen=True)
class BoxConstraints:
    """Layout bounds handed to a render box by its parent."""

    min_width: float = 0.0
    max_width: float = float("inf")
    min_height: float = 0.0
    max_height: float = float("inf")

    @property
    def has_bounded_width(self) -> bool:
        return self.max_width < float("inf")

    @property
    def has_bounded_height(self) -> bool:
        return self.max_height < float("inf")


# ============================================================================
# Host Capabilities
# ============================================================================


class RenderBox(Protocol):
    """A laid-out UI element."""

    @property
    def constraints(self) -> BoxConstraints: ...

    @property
    def has_size(self) -> bool: ...

    @property
    def size(self) -> Size: ...

    @property
    def parent(self) -> "RenderBox | None": ...

    def local_to_global(self, point: Offset) -> Offset: ...


class Overlay(Protocol):
    """The layer that floating entries are inserted into."""

    def insert(self, entry: Any) -> None: ...

    def remove(self, entry: Any) -> None: ...


class SnackbarMessenger(Protocol):
    """Shows snackbars for a screen."""

    def hide_current_snackbar(self) -> None: ...

    def show_snackbar(self, spec: Any) -> None: ...


@runtime_checkable
class UIContext(Protocol):
    """A handle on a location in the host's UI tree."""

    def is_attached(self) -> bool: ...

    def screen_size(self) -> Size: ...

    def orientation(self) -> Orientation: ...

    def find_render_box(self) -> RenderBox | None: ...

    def overlay(self) -> Overlay | None: ...

    def scaffold_messenger(self) -> SnackbarMessenger | None: ...

    async def show_dialog(self, spec: Any) -> Any: ...

    async def show_modal_bottom_sheet(self, spec: Any) -> Any: ...


def is_valid_context(context: UIContext | None) -> bool:
    """Check that a context exists and is still attached to the UI tree."""
    if context is None:
        return False
    try:
        return bool(context.is_attached())
    except Exception as e:
        logger.debug(f"Context attachment check failed, treating it as stale: {e}")
        return False
