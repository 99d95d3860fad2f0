# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import logging
import re
from typing import Callable, Dict, Optional

from cowlib.cowerror import TemplateRenderError
from cowlib.cowmodel import CowAction, CowConfig, action_name

logger = logging.getLogger(__name__)

# Real ".cow" files are Perl scripts assigning the figure to "$the_cow" with
# a heredoc terminated by EOC (End Of Cow). The opening EOC may be quoted and
# may be followed by a semicolon.
COW_MARKER = re.compile(r"\$the_cow")
COW_BLOCK_START = re.compile(r"EOC['\"]?;?[^\n]*\n")
COW_BLOCK_END = re.compile(r"^EOC", re.M)

# Perl escapes: keep the character following the backslash.
COW_ESCAPE = re.compile(r"\\(.)")

COMMENT_LINE = re.compile(r"^#.*$", re.M)

TOKEN_PATTERNS = [
    re.compile(r"\$([a-z]+)"),
    re.compile(r"\$\{([a-z]+)\}"),
]


def find_cow_block(template: str) -> Optional[str]:
    """Return the raw text between the EOC delimiters, or None."""
    start = COW_BLOCK_START.search(template)
    if start is None:
        return None

    end = COW_BLOCK_END.search(template, start.end())
    if end is None:
        return None

    return template[start.end() : end.start()]


def strip_comments(template: str) -> str:
    """Blank every line starting with '#', keeping the line breaks."""
    return COMMENT_LINE.sub("", template)


def extract_template(template: str) -> str:
    """Get the figure out of a ".cow" file.

    Perl is not interpreted: when the source declares "$the_cow" the text
    between the EOC tokens is taken and unescaped. Anything else, including
    a Perl script whose heredoc cannot be found, is handled as a plain text
    template with comments.

    :param template: Source of the ".cow" file.
    :returns: The figure, still holding its tokens.
    """
    if COW_MARKER.search(template):
        block = find_cow_block(template)
        if block is not None:
            logger.debug("Extracted %d chars from the EOC block", len(block))
            return COW_ESCAPE.sub(r"\1", block)
        logger.debug("No EOC block found, falling back to plain template")

    return strip_comments(template)


def _thoughts(config: CowConfig) -> str:
    return "\\" if action_name(config.action) == CowAction.SAY.value else "o"


TOKEN_RULES: Dict[str, Callable[[CowConfig], str]] = {
    "eyes": lambda config: config.eyes.ljust(2),
    "tongue": lambda config: config.tongue.ljust(2),
    "thoughts": _thoughts,
}


def substitute_tokens(template: str, config: CowConfig) -> str:
    """Replace $name and ${name} tokens with the configured values.

    Unknown tokens are kept verbatim.

    :param template: The extracted figure.
    :param config: Values for eyes, tongue and thoughts.
    :returns: The figure ready to be printed.
    """

    def replace(match: "re.Match[str]") -> str:
        rule = TOKEN_RULES.get(match.group(1))
        if rule is None:
            return match.group(0)
        return rule(config)

    for pattern in TOKEN_PATTERNS:
        try:
            template = pattern.sub(replace, template)
        except (re.error, TypeError, AttributeError) as e:
            raise TemplateRenderError(
                "Failed to replace template variables while rendering cow!"
            ) from e

    return template
