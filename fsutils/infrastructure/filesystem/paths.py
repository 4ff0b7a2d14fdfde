"""Path normalisation helpers."""
import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def resolve_path(path: PathLike) -> str:
    """Return the absolute, normalised form of path."""
    return os.path.abspath(os.fspath(path))
