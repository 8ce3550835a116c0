"""Holds the project location that assets are resolved against."""

from __future__ import annotations

import os
from typing import Union


class AssetManager:
    """Remembers the project path given at start-up."""

    def __init__(self) -> None:
        self._project_path = ""

    def initialize(self, project_path: Union[str, "os.PathLike[str]"]) -> None:
        """Record ``project_path`` as the project location."""
        self._project_path = os.fspath(project_path)

    @property
    def project_path(self) -> str:
        """The recorded project path, empty before initialization."""
        return self._project_path