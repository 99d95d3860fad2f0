# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__version__ = "0.5.0"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

from cowlib.cowballoon import render_balloon, wrap_text
from cowlib.cowerror import CowError, CowNotFoundError, TemplateRenderError
from cowlib.cowsay import CowAction, CowConfig, Cowsay, render_cow
from cowlib.cowtemplate import extract_template, substitute_tokens

__all__ = [
    "CowAction",
    "CowConfig",
    "CowError",
    "CowNotFoundError",
    "Cowsay",
    "TemplateRenderError",
    "extract_template",
    "render_balloon",
    "render_cow",
    "substitute_tokens",
    "wrap_text",
]
