"""Window settings, a headless native window and the platform that makes windows."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

Size = Tuple[int, int]


class WindowMode(enum.Enum):
    """How a window occupies the screen."""

    FULLSCREEN = 0
    WINDOWED_FULLSCREEN = 1
    WINDOWED = 2


class WindowType(enum.Enum):
    """The role a window plays."""

    NORMAL = 0
    MENU = 1
    TOOL_TIP = 2
    NOTIFICATION = 3
    CURSOR_DECORATOR = 4
    GAME_WINDOW = 5


class CursorMode(enum.Enum):
    """Cursor behaviour inside a window."""

    NORMAL = 0
    HIDDEN = 1
    DISABLED = 2


@dataclass
class WindowInitDesc:
    """Settings a native window is created with."""

    window_type: Optional[WindowType] = None
    desired_size: Size = (0, 0)
    window_location: Optional[Tuple[int, int]] = None
    title: str = ""
    is_decorated: bool = True
    maximized: bool = False
    full_screen: bool = False
    supports_minimize: bool = True
    supports_maximize: bool = True


def _as_size(width: Union[int, Size], height: Optional[int]) -> Size:
    if height is None:
        if not isinstance(width, tuple):
            raise TypeError("give a width and a height, or one (width, height) pair")
        w, h = width
        return int(w), int(h)
    if isinstance(width, tuple):
        raise TypeError("give a width and a height, or one (width, height) pair")
    return int(width), int(height)


class NativeWindow:
    """A window that keeps its state in memory without a display."""

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self.title = ""
        self.location: Optional[Tuple[int, int]] = None
        self.parent: Optional[NativeWindow] = None
        self.window_type: Optional[WindowType] = None
        self.decorated = True
        self.full_screen = False
        self.supports_minimize = True
        self.supports_maximize = True
        self.cursor_mode = CursorMode.NORMAL
        self._visible = False
        self._focused = False
        self._iconified = False
        self._maximized = False
        self._close_requested = False
        self._destroyed = False

    def _check_alive(self) -> None:
        if self._destroyed:
            raise RuntimeError("window has been destroyed")

    def initialize(self, desc: WindowInitDesc, parent: Optional["NativeWindow"] = None) -> None:
        """Apply ``desc`` and attach the window to ``parent``."""
        self._check_alive()
        self.window_type = desc.window_type
        self.title = desc.title
        self.location = desc.window_location
        self.decorated = desc.is_decorated
        self.full_screen = desc.full_screen
        self.supports_minimize = desc.supports_minimize
        self.supports_maximize = desc.supports_maximize
        self.parent = parent
        self.set_size(desc.desired_size)
        if desc.maximized:
            self.maximize()

    def resize(self, width: Union[int, Size], height: Optional[int] = None) -> None:
        """Change the window's size."""
        self._check_alive()
        self.set_size(width, height)

    def set_size(self, width: Union[int, Size], height: Optional[int] = None) -> None:
        """Record the window's size."""
        self._width, self._height = _as_size(width, height)

    def show(self) -> None:
        """Make the window visible."""
        self._check_alive()
        self._visible = True

    def hide(self) -> None:
        """Hide the window."""
        self._check_alive()
        self._visible = False
        self._focused = False

    def destroy(self) -> None:
        """Close the window for good."""
        self._visible = False
        self._focused = False
        self._destroyed = True

    def minimize(self) -> None:
        """Iconify the window."""
        self._check_alive()
        self._iconified = True
        self._maximized = False
        self._focused = False

    def maximize(self) -> None:
        """Maximize the window."""
        self._check_alive()
        self._maximized = True
        self._iconified = False

    def restore(self) -> None:
        """Return from the minimized or maximized state."""
        self._check_alive()
        self._maximized = False
        self._iconified = False

    def focus(self) -> None:
        """Give the window input focus."""
        self._check_alive()
        self._focused = True

    def set_title(self, title: str) -> None:
        """Change the window's title."""
        self._check_alive()
        self.title = title

    def request_close(self) -> None:
        """Mark the window as asked to close."""
        self._close_requested = True

    def is_focused(self) -> bool:
        """Return whether the window has input focus."""
        return self._focused

    def should_close(self) -> bool:
        """Return whether the window has been asked to close."""
        return self._close_requested

    def is_iconified(self) -> bool:
        """Return whether the window is minimized."""
        return self._iconified

    @property
    def is_visible(self) -> bool:
        """Whether the window is shown."""
        return self._visible

    @property
    def is_maximized(self) -> bool:
        """Whether the window is maximized."""
        return self._maximized

    @property
    def is_destroyed(self) -> bool:
        """Whether the window has been destroyed."""
        return self._destroyed

    @property
    def width(self) -> int:
        """The window's width."""
        return self._width

    @property
    def height(self) -> int:
        """The window's height."""
        return self._height

    @property
    def size(self) -> Size:
        """The window's ``(width, height)``."""
        return self._width, self._height


class Platform:
    """Creates native windows and drives the per-frame platform work."""

    def __init__(self) -> None:
        self.initialized = False
        self.frame_count = 0
        self._windows: List[NativeWindow] = []

    def init(self) -> bool:
        """Start the platform; return whether it succeeded."""
        self.initialized = True
        self.frame_count = 0
        return True

    def shutdown(self) -> None:
        """Destroy every window and stop the platform."""
        for window in self._windows:
            window.destroy()
        self._windows.clear()
        self.initialized = False

    def update(self) -> None:
        """Process one frame of platform events."""
        if not self.initialized:
            raise RuntimeError("platform is not initialized")
        self.frame_count += 1

    def make_window(self) -> NativeWindow:
        """Create a new native window."""
        window = NativeWindow()
        self._windows.append(window)
        return window

    @property
    def windows(self) -> Tuple[NativeWindow, ...]:
        """The windows made so far and not yet shut down."""
        return tuple(self._windows)