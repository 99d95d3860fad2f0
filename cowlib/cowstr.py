# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import re
from typing import List, Union

REPLACEMENT_CHAR = "\ufffd"

LINE_BREAK = re.compile(r"\r\n|\r|\n")
LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def decode_text(text: Union[str, bytes]) -> str:
    """Turn user input into text, never failing on bad encodings.

    :param text: Text or UTF-8 encoded bytes.
    :returns: The text, invalid byte sequences replaced by U+FFFD.
    """
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text


def sanitize_line(line: str) -> str:
    """Replace lone surrogates (e.g. from surrogateescape) by U+FFFD."""
    return LONE_SURROGATE.sub(REPLACEMENT_CHAR, line)


def split_lines(text: str) -> List[str]:
    """Split on any line break. A trailing break does not add an empty line.

    :param text: Text to be split.
    :returns: The lines, at least one.
    """
    lines = LINE_BREAK.split(text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines
