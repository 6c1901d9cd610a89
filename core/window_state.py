import logging
from enum import Enum
from typing import Any, Optional

from core.config_store import ConfigStore, Geometry, INT32_MAX

DEFAULT_GEOMETRY = Geometry(0, 0, 400, 300, False)
FONT_STEP = 5
MIN_ADJUSTABLE_SIZE = 5

logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    UNINITIALIZED = "uninitialized"
    RESTORING = "restoring"
    INTERACTIVE = "interactive"
    SAVING = "saving"
    TERMINATED = "terminated"


class WindowStateController:
    """Moves persisted values into the live window/editor and back.

    ``window`` is anything with the QWidget geometry API (``x()``, ``y()``,
    ``width()``, ``height()``, ``isFullScreen()``, ``move()``, ``resize()``,
    ``showFullScreen()``). ``editor`` provides ``font_size()``,
    ``set_font_size()`` and ``refresh()``.
    """

    def __init__(self, store: ConfigStore, window: Any, editor: Any,
                 log: Optional[logging.Logger] = None) -> None:
        self.store = store
        self.window = window
        self.editor = editor
        self.log = log or logger
        self.state = LifecycleState.UNINITIALIZED

    def _apply_geometry(self, geometry: Geometry) -> None:
        if geometry.fullscreen:
            self.window.showFullScreen()
            return
        self.window.resize(geometry.width, geometry.height)
        self.window.move(geometry.x, geometry.y)

    def restore(self) -> None:
        if self.state is not LifecycleState.UNINITIALIZED:
            self.log.warning("restore() called in state %s, ignored", self.state.value)
            return
        self.state = LifecycleState.RESTORING

        existed = self.store.exists()
        self.store.ensure_exists()

        if not existed:
            self._apply_geometry(DEFAULT_GEOMETRY)
        else:
            geometry = self.store.load_geometry()
            if geometry is None:
                self.log.info("No saved window geometry, using default %s", DEFAULT_GEOMETRY.to_line())
                geometry = DEFAULT_GEOMETRY
            self._apply_geometry(geometry)

        self.editor.set_font_size(self.store.load_font_size())
        self.state = LifecycleState.INTERACTIVE

    def _set_font_size(self, size: int) -> int:
        self.store.save_font_size(size)
        self.editor.set_font_size(size)
        self.editor.refresh()
        return size

    def increase_font_size(self) -> int:
        current = self.editor.font_size()
        if self.state is not LifecycleState.INTERACTIVE or current >= INT32_MAX:
            return current
        # saturate below INT32_MAX, which is not a storable size
        size = min(current + FONT_STEP, INT32_MAX - 1)
        if size == current:
            return current
        return self._set_font_size(size)

    def decrease_font_size(self) -> int:
        current = self.editor.font_size()
        if self.state is not LifecycleState.INTERACTIVE or current <= MIN_ADJUSTABLE_SIZE:
            return current
        return self._set_font_size(current - FONT_STEP)

    def save_on_exit(self) -> None:
        """Persist the window bounds, keeping the stored font size."""
        if self.state in (LifecycleState.SAVING, LifecycleState.TERMINATED):
            return
        self.state = LifecycleState.SAVING
        try:
            geometry = Geometry(self.window.x(), self.window.y(),
                                self.window.width(), self.window.height(),
                                bool(self.window.isFullScreen()))
            self.store.save_geometry(geometry)
        except Exception as e:
            self.log.error("Failed to save window geometry: %s", e)
        finally:
            self.state = LifecycleState.TERMINATED
