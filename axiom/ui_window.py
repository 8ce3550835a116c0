"""A widget that owns a native window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .widget import LayerID, Widget
from .window import NativeWindow, WindowType


@dataclass
class WindowArguments:
    """Construction arguments of a :class:`UIWindow`."""

    window_type: WindowType = WindowType.NORMAL
    title: str = ""
    screen_position: Optional[Tuple[int, int]] = None
    size: Tuple[int, int] = (0, 0)
    decorated: bool = True
    auto_center: bool = True
    topmost_window: bool = False
    supports_minimize: bool = True
    supports_maximize: bool = True
    has_close_button: bool = True
    full_screen: bool = False
    maximized: bool = False


class UIWindow(Widget):
    """A top-level window widget; acts on its native window once it has one."""

    Arguments = WindowArguments

    def __init__(self) -> None:
        super().__init__()
        self.native_window: Optional[NativeWindow] = None
        self.construct(WindowArguments())

    def construct(self, args: WindowArguments) -> None:
        """Copy the settings from ``args``."""
        self.window_type = args.window_type
        self.title = args.title
        self.screen_position = args.screen_position
        self.size = args.size
        self.decorated = args.decorated
        self.auto_center = args.auto_center
        self.topmost_window = args.topmost_window
        self.supports_minimize = args.supports_minimize
        self.supports_maximize = args.supports_maximize
        self.has_close_button = args.has_close_button
        self.full_screen = args.full_screen
        self.maximized = args.maximized

    def on_paint(self) -> LayerID:
        return 0

    def show(self) -> None:
        """Show the native window, if there is one."""
        if self.native_window is not None:
            self.native_window.show()

    def hide(self) -> None:
        """Hide the native window, if there is one."""
        if self.native_window is not None:
            self.native_window.hide()

    def set_focus(self) -> None:
        """Focus the native window, if there is one."""
        if self.native_window is not None:
            self.native_window.focus()

    def is_focused_initially(self) -> bool:
        """Return whether the window takes focus when first shown."""
        return True

    def supports_keyboard_focus(self) -> bool:
        """Return whether the window can take keyboard focus."""
        return True