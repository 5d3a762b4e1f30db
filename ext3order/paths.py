"""Path normalisation shared by directive extraction and graph building."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def resolve_path(path: Union[str, Path], base_dir: Union[str, Path]) -> str:
    """Return ``path`` as a normalised absolute path, relative to ``base_dir``."""
    joined = os.path.join(os.fspath(base_dir), os.fspath(path))
    return os.path.normpath(os.path.abspath(joined))


__all__ = ["resolve_path"]
