# -*- coding: UTF-8 -*-

"""Parser and renderer for the ".cow" files used by the `cowsay` program."""

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

from dataclasses import replace
from typing import Union

from cowlib.cowballoon import render_balloon
from cowlib.cowmodel import CowAction, CowConfig
from cowlib.cowtemplate import extract_template, substitute_tokens

__all__ = ["CowAction", "CowConfig", "Cowsay", "render_cow"]

# ASCII whitespace and NUL, other Unicode spaces belong to the figure.
TRAILING_WHITESPACE = " \t\n\r\0\x0b"


def render_cow(config: CowConfig) -> str:
    """Render the balloon with the message on top of the figure.

    :param config: What to render.
    :returns: The cow, without trailing ASCII whitespace.
    :raises TemplateRenderError: If the template tokens could not be replaced.
    """
    figure = substitute_tokens(extract_template(config.template), config)
    balloon = render_balloon(config.text, config.action)
    return (balloon + "\n" + figure).rstrip(TRAILING_WHITESPACE)


class Cowsay:
    """Collect the render options one at a time.

    Every setter returns the instance so calls can be chained. The options
    are frozen into a CowConfig when the cow is rendered.
    """

    def __init__(self, config: CowConfig = CowConfig()) -> None:
        self.config = config

    def set_template(self, template: str) -> "Cowsay":
        self.config = replace(self.config, template=template)
        return self

    def set_eyes(self, eyes: str) -> "Cowsay":
        self.config = replace(self.config, eyes=eyes)
        return self

    def set_tongue(self, tongue: str) -> "Cowsay":
        self.config = replace(self.config, tongue=tongue)
        return self

    def set_action(self, action: Union[CowAction, str]) -> "Cowsay":
        self.config = replace(self.config, action=action)
        return self

    def set_text(self, text: Union[str, bytes]) -> "Cowsay":
        self.config = replace(self.config, text=text)
        return self

    def render_cow(self) -> str:
        return render_cow(self.config)
