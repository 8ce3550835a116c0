"""Keeps the application's windows and creates their native windows."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .ui_window import UIWindow
from .window import NativeWindow, Platform, WindowInitDesc, WindowType


class WindowManager:
    """Holds UI windows and gives each a native window from ``platform``."""

    def __init__(self, platform: Platform) -> None:
        self._platform = platform
        self._windows: List[UIWindow] = []

    def add_window(self, window: UIWindow, show_immediately: bool = True) -> UIWindow:
        """Register ``window``, create its native window and optionally show it."""
        self._windows.append(window)
        self.make_window(window)
        if show_immediately:
            window.show()
            if window.supports_keyboard_focus() and window.is_focused_initially():
                window.set_focus()
        return window

    def find_ui_window_by_native_window(self, native_window: NativeWindow) -> Optional[UIWindow]:
        """Return the UI window that owns ``native_window``, or None."""
        for window in self._windows:
            if window.native_window is native_window:
                return window
        return None

    def update_windows(self) -> List[UIWindow]:
        """Return the windows whose native window has been asked to close."""
        return [
            window
            for window in self._windows
            if window.native_window is not None and window.native_window.should_close()
        ]

    def make_window(self, window: UIWindow, parent: Optional[UIWindow] = None) -> NativeWindow:
        """Create and attach a native window for ``window``."""
        desc = WindowInitDesc(
            window_type=WindowType.NORMAL,
            title=window.title,
            window_location=window.screen_position,
            is_decorated=window.decorated,
            full_screen=window.full_screen,
            desired_size=window.size,
            maximized=window.maximized,
            supports_minimize=window.supports_minimize,
            supports_maximize=window.supports_maximize,
        )
        native = self._platform.make_window()
        native.initialize(desc, parent.native_window if parent is not None else None)
        window.native_window = native
        return native

    @property
    def windows(self) -> Tuple[UIWindow, ...]:
        """The registered windows, in the order they were added."""
        return tuple(self._windows)