"""Loading asset files relative to a root directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .errors import ensure

_PathLike = Union[str, "os.PathLike[str]"]


class ResourceLoader:
    """Reads text and binary assets from files under a root directory."""

    def __init__(self, root: _PathLike) -> None:
        self.root = Path(root)

    def _read(self, name: _PathLike) -> bytes:
        path = self.root / name
        try:
            with path.open("rb") as file:
                return file.read()
        except OSError:
            ensure(False, "failed to open file")
            raise  # unreachable: ensure always raises here

    def load_string(self, name: _PathLike) -> str:
        """The contents of ``name`` as text, with line endings normalised."""
        data = self._read(name).decode("utf-8")
        return data.replace("\r\n", "\n").replace("\r", "\n")

    def load_binary(self, name: _PathLike) -> bytes:
        """The raw contents of ``name``."""
        return self._read(name)