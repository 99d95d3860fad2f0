# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

from pathlib import Path
from typing import List


class CowError(Exception):
    """Base class for the errors raised by cowlib."""


class TemplateRenderError(CowError):
    """The template variables could not be replaced while rendering a cow."""


class CowNotFoundError(CowError, LookupError):
    """No cow file matches the requested name in the cow path."""

    def __init__(self, name: str, searched: List[Path]) -> None:
        super(CowNotFoundError, self).__init__(
            "Could not find cowfile for '%s'" % name
        )
        self.name = name
        self.searched = searched
