#!/usr/bin/env python3
# -*- coding: UTF-8 -*-
# PYTHON_ARGCOMPLETE_OK

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import logging
import sys
from typing import List, Optional

from cowlib import __version__
from cowlib.cowcmd import CowArg, CowCmd, CowCompleterArg, cow_arg_parser
from cowlib.cowconfig import debug_enabled, pdb_enabled
from cowlib.cowfile import DEFAULT_COW, list_cows, load_cow
from cowlib.cowmodel import DEFAULT_EYES, DEFAULT_TONGUE, CowAction
from cowlib.cowsay import Cowsay


def complete_cow(arg: CowCompleterArg) -> List[str]:
    prefix = arg.prefix or ""
    names = set()
    for cows in list_cows().values():
        names.update(cows)
    return sorted(x for x in names if x.startswith(prefix))


def make_cow(
    action: CowAction, message: Optional[str], cow: str, eyes: str, tongue: str
) -> str:
    if message is None:
        message = sys.stdin.read()

    return (
        Cowsay()
        .set_template(load_cow(cow))
        .set_eyes(eyes)
        .set_tongue(tongue)
        .set_action(action)
        .set_text(message)
        .render_cow()
    )


@CowCmd("say", helpmsg="Make the cow say something.")
@CowArg("message", short_name="m")
@CowArg("cow", short_name="f", completercb=complete_cow)
@CowArg("eyes", short_name="e")
@CowArg("tongue", short_name="T")
def say(
    message: Optional[str] = None,
    cow: str = DEFAULT_COW,
    eyes: str = DEFAULT_EYES,
    tongue: str = DEFAULT_TONGUE,
) -> str:
    """Cow say something.

    :param message: The message, read from the standard input if not given.
    :param cow: Name of the cow in the cow path, or path to a cow file.
    :param eyes: Appearance of the eyes, two characters.
    :param tongue: Appearance of the tongue, two characters.
    """
    return make_cow(CowAction.SAY, message, cow, eyes, tongue)


@CowCmd("think", helpmsg="Make the cow think something.")
@CowArg("message", short_name="m")
@CowArg("cow", short_name="f", completercb=complete_cow)
@CowArg("eyes", short_name="e")
@CowArg("tongue", short_name="T")
def think(
    message: Optional[str] = None,
    cow: str = DEFAULT_COW,
    eyes: str = DEFAULT_EYES,
    tongue: str = DEFAULT_TONGUE,
) -> str:
    """Cow think something.

    :param message: The message, read from the standard input if not given.
    :param cow: Name of the cow in the cow path, or path to a cow file.
    :param eyes: Appearance of the eyes, two characters.
    :param tongue: Appearance of the tongue, two characters.
    """
    return make_cow(CowAction.THINK, message, cow, eyes, tongue)


@CowCmd("list", helpmsg="List the cows in the cow path.")
def list_cmd() -> str:
    blocks = []
    for dirname, cows in list_cows().items():
        blocks.append("Cow files in %s:\n%s" % (dirname, " ".join(cows)))
    return "\n\n".join(blocks)


@CowCmd("version", helpmsg="Show cowlib version.")
def show_version() -> str:
    return "Version: %s" % (__version__)


def root_cmd() -> CowCmd:
    return CowCmd(
        "cow",
        helpmsg="Render messages in cowsay balloons.",
        subcmds=[say, think, list_cmd, show_version],
    )


def main(args: Optional[List[str]] = None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args is None:
        args = sys.argv[1:]
    ret = cow_arg_parser(root_cmd(), args)

    if "error" in ret["argparse"]:
        sys.stderr.write(f'ERROR: {ret["argparse"]["error"]}')
        sys.exit(-1)

    if "help" in ret["argparse"]:
        sys.stdout.write(ret["argparse"]["help"])
        sys.exit(0)

    if ret["value"] is not None:
        print(ret["value"])


def run() -> None:
    if pdb_enabled():
        import pdb

        pdb.run("main()", globals())
    else:
        main()


if __name__ == "__main__":
    run()
