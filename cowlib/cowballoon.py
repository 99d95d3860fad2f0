# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

from textwrap import TextWrapper
from typing import List, Tuple, Union

from cowlib.cowmodel import CowAction, action_name
from cowlib.cowstr import decode_text, sanitize_line, split_lines

BALLOON_WIDTH = 40

# Room taken by the border glyphs and their padding.
BORDER_WIDTH = 4

WRAP_WIDTH = BALLOON_WIDTH - BORDER_WIDTH

# (left, right) glyphs for the first, middle and last lines.
Borders = Tuple[Tuple[str, str], Tuple[str, str], Tuple[str, str]]

THINK_BORDERS: Borders = (("(", ")"), ("(", ")"), ("(", ")"))
SAY_SINGLE_LINE_BORDERS: Borders = (("<", ">"), ("<", ">"), ("<", ">"))
SAY_BORDERS: Borders = (("/", "\\"), ("|", "|"), ("\\", "/"))


def wrap_text(text: Union[str, bytes], width: int = WRAP_WIDTH) -> List[str]:
    """Soft wrap the text, keeping the line breaks it already has.

    Words longer than the width are cut. Lengths are counted in code points.
    Lines that already fit are kept as they are, whitespace included; only
    the whitespace where a line is broken gets dropped.

    :param text: The message.
    :param width: Maximum length of a line.
    :returns: The wrapped lines, at least one.
    """
    wrapper = TextWrapper(
        width=width,
        expand_tabs=False,
        replace_whitespace=False,
        break_long_words=True,
        break_on_hyphens=False,
    )

    lines: List[str] = []
    for paragraph in split_lines(decode_text(text)):
        if len(paragraph) <= width:
            lines.append(paragraph)
        else:
            lines += wrapper.wrap(paragraph) or [""]

    return [sanitize_line(line) for line in lines]


def select_borders(lines: List[str], action: Union[CowAction, str]) -> Borders:
    if action_name(action) == CowAction.THINK.value:
        return THINK_BORDERS
    if len(lines) == 1:
        return SAY_SINGLE_LINE_BORDERS
    return SAY_BORDERS


def balloon_lines(
    text: Union[str, bytes], action: Union[CowAction, str] = CowAction.SAY
) -> List[str]:
    lines = wrap_text(text)
    first, middle, last = select_borders(lines, action)

    size = max(len(line) for line in lines)

    balloon = [" " + "_" * (size + 2)]
    last_idx = len(lines) - 1
    for idx, line in enumerate(lines):
        if idx == 0:
            left, right = first
        elif idx == last_idx:
            left, right = last
        else:
            left, right = middle
        balloon.append("%s %s %s" % (left, line.ljust(size), right))
    balloon.append(" " + "-" * (size + 2))

    return balloon


def render_balloon(
    text: Union[str, bytes], action: Union[CowAction, str] = CowAction.SAY
) -> str:
    """Render the message inside a speech or thought balloon."""
    return "\n".join(balloon_lines(text, action))
