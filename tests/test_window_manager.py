from axiom.ui_window import UIWindow, WindowArguments
from axiom.window import NativeWindow, Platform, WindowType
from axiom.window_manager import WindowManager


def _manager():
    platform = Platform()
    platform.init()
    return WindowManager(platform), platform


def _window(title="Main", size=(640, 480)):
    return UIWindow.create(WindowArguments(title=title, size=size))


def test_add_window_shows_and_focuses():
    manager, platform = _manager()
    window = _window()
    assert manager.add_window(window, True) is window
    native = window.native_window
    assert native in platform.windows
    assert native.is_visible
    assert native.is_focused()
    assert manager.windows == (window,)


def test_add_window_without_showing():
    manager, _ = _manager()
    window = manager.add_window(_window(), False)
    assert not window.native_window.is_visible


def test_native_window_gets_window_settings():
    manager, _ = _manager()
    window = manager.add_window(_window("Tools", (300, 200)), False)
    native = window.native_window
    assert native.title == "Tools"
    assert native.size == (300, 200)
    assert native.window_type is WindowType.NORMAL


def test_find_by_native_window():
    manager, _ = _manager()
    first = manager.add_window(_window("A"), False)
    second = manager.add_window(_window("B"), False)
    assert manager.find_ui_window_by_native_window(second.native_window) is second
    assert manager.find_ui_window_by_native_window(first.native_window) is first
    assert manager.find_ui_window_by_native_window(NativeWindow()) is None


def test_make_window_with_parent():
    manager, _ = _manager()
    parent = manager.add_window(_window("Parent"), False)
    child = _window("Child")
    native = manager.make_window(child, parent)
    assert child.native_window is native
    assert native.parent is parent.native_window


def test_update_windows_reports_close_requests():
    manager, _ = _manager()
    first = manager.add_window(_window("A"), False)
    second = manager.add_window(_window("B"), False)
    assert manager.update_windows() == []
    second.native_window.request_close()
    assert manager.update_windows() == [second]
    assert first not in manager.update_windows()