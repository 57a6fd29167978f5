"""Local destination directory helpers."""

import os
import shutil
from pathlib import Path
from typing import Union


def empty_dir(path: Union[str, Path]) -> Path:
    """Ensure ``path`` exists as a directory with no contents.

    The directory itself is kept; every file, symlink and subdirectory in it
    is removed. A missing directory is created.
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)

    for entry in os.scandir(path):
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.remove(entry.path)

    return path
