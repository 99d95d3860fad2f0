# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import os
from pathlib import Path
from typing import List, Optional


def find_in_parent(dirname: Path, name: Path) -> Optional[Path]:
    if (dirname / name).exists():
        return dirname / name
    if dirname.parent != dirname:
        return find_in_parent(dirname.parent, name)
    return None


SCRIPT_DIR = Path(__file__).parent.resolve()

# Cows shipped with the package.
COW_BUNDLED = SCRIPT_DIR / "cows"

COW_LOCAL_NAME = Path(".cows")


def local_cow_dir(start: Optional[Path] = None) -> Optional[Path]:
    """Nearest ".cows" directory, looked up from the working directory."""
    return find_in_parent((start or Path(".")).resolve(), COW_LOCAL_NAME)


def env_cow_path() -> List[Path]:
    """Directories listed in COWPATH, in order, empty entries ignored."""
    raw = os.environ.get("COWPATH", "")
    return [Path(entry) for entry in raw.split(os.pathsep) if entry]


def debug_enabled() -> bool:
    return bool(os.environ.get("COW_DEBUG", False))


def pdb_enabled() -> bool:
    return bool(os.environ.get("COW_PDB", False))
