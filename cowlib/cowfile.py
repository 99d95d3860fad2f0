# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from cowlib.cowconfig import COW_BUNDLED, env_cow_path, local_cow_dir
from cowlib.cowerror import CowNotFoundError

logger = logging.getLogger(__name__)

COW_SUFFIX = ".cow"
DEFAULT_COW = "default"


def cow_path() -> List[Path]:
    """Directories searched for cow files.

    COWPATH entries come first, then the nearest ".cows" directory and
    finally the cows bundled with cowlib.
    """
    path = env_cow_path()

    local = local_cow_dir()
    if local is not None:
        path.append(local)

    path.append(COW_BUNDLED)

    # Keep the first occurrence of each directory.
    unique: List[Path] = []
    for entry in path:
        if entry not in unique:
            unique.append(entry)
    return unique


def list_cows(path: Optional[List[Path]] = None) -> Dict[Path, List[str]]:
    """Names of the cows available in each directory of the cow path."""
    if path is None:
        path = cow_path()

    cows: Dict[Path, List[str]] = {}
    for dirname in path:
        if not dirname.is_dir():
            logger.debug("Skip cow directory %s, it does not exist", dirname)
            cows[dirname] = []
            continue

        cows[dirname] = sorted(
            entry.stem
            for entry in dirname.iterdir()
            if entry.suffix == COW_SUFFIX and entry.is_file()
        )
    return cows


def find_cow(name: str, path: Optional[List[Path]] = None) -> Path:
    """Resolve a cow name to a file.

    :param name: A cow name ("tux"), or the path of a ".cow" file.
    :param path: Directories to search, defaults to cow_path().
    :returns: Path to the cow file.
    :raises CowNotFoundError: If no file matches.
    """
    direct = Path(name)
    if (os.sep in name or name.endswith(COW_SUFFIX)) and direct.is_file():
        return direct

    if path is None:
        path = cow_path()

    for dirname in path:
        candidate = dirname / (name + COW_SUFFIX)
        if candidate.is_file():
            return candidate

    raise CowNotFoundError(name, path)


def load_cow(name: str = DEFAULT_COW, path: Optional[List[Path]] = None) -> str:
    """Read the source of a cow file, invalid UTF-8 bytes are replaced."""
    cowfile = find_cow(name, path)
    logger.debug("Loading cow %s from %s", name, cowfile)
    with open(cowfile, "rb") as f:
        return f.read().decode("utf-8", errors="replace")
