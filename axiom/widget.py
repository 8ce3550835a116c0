"""The base class of user-interface widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Tuple, TypeVar

LayerID = int

W = TypeVar("W", bound="Widget")


class Widget(ABC):
    """A widget placed at a location, optionally with a desired size."""

    Arguments: ClassVar[Optional[type]] = None

    def __init__(self) -> None:
        self.parent: Optional[Widget] = None
        self.location: Tuple[int, int] = (0, 0)
        self.desired_size: Optional[Tuple[int, int]] = None

    def construct(self, args: Any) -> None:
        """Apply construction arguments; the base widget takes none."""

    def paint(self) -> LayerID:
        """Paint the widget and return the layer it was painted on."""
        return 0

    def tick(self, current_time: float, delta_time: float) -> None:
        """Advance the widget by one frame; the base widget does nothing."""

    @abstractmethod
    def on_paint(self) -> LayerID:
        """Draw the widget's own content and return its layer."""

    @classmethod
    def create(cls: type[W], args: Any = None) -> W:
        """Make a widget and construct it from ``args`` or default arguments."""
        if args is None and cls.Arguments is not None:
            args = cls.Arguments()
        widget = cls()
        widget.construct(args)
        return widget