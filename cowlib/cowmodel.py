# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import enum
from dataclasses import dataclass
from typing import Union

DEFAULT_EYES = "oo"
DEFAULT_TONGUE = "  "


class CowAction(enum.Enum):
    SAY = "say"
    THINK = "think"


@dataclass(frozen=True)
class CowConfig:
    """Everything needed to render one cow.

    :param template: Source of a ".cow" file or a plain text template.
    :param eyes: Replaces the $eyes token, padded to two columns.
    :param tongue: Replaces the $tongue token, padded to two columns.
    :param action: Say or think, selects the balloon and the $thoughts glyph.
    :param text: Message to put in the balloon. Bytes are decoded as UTF-8.
    """

    template: str = ""
    eyes: str = DEFAULT_EYES
    tongue: str = DEFAULT_TONGUE
    action: Union[CowAction, str] = CowAction.SAY
    text: Union[str, bytes] = ""


def action_name(action: Union[CowAction, str]) -> str:
    """Name of the action, accepting both enum members and plain strings."""
    if isinstance(action, CowAction):
        return action.value
    return str(action)
