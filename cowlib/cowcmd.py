# -*- coding: UTF-8 -*-

__author__ = "Fernando Witt"
__credits__ = ["Fernando Witt"]

__license__ = "MIT"
__maintainer__ = "Fernando Witt"
__email__ = "ferawitt@gmail.com"

import functools
import inspect
import logging
import os
import re
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from typing import Any, Callable, Dict, List, Optional, Union, get_args, get_origin

import argcomplete

logger = logging.getLogger(__name__)

PARAM_DOC = re.compile(r"^:param (\S+): ([\S \t]+)$", re.M)


class CowDecorator:
    def __init__(self) -> None:
        self._cow_func: Optional[Callable[..., Any]] = None

    def __call__(self, _cow_func: Callable[..., Any]) -> Callable[..., Any]:
        self._cow_func = _cow_func

        @functools.wraps(_cow_func)
        def wrapper(*args: Any, **vargs: Any) -> Any:
            return _cow_func(*args, **vargs)

        wrapper._cow_dec_chain = self  # type: ignore
        return wrapper


def decorator_chain(func: Any) -> List[CowDecorator]:
    """Decorators applied to func, outermost first."""
    chain = []
    dec = getattr(func, "_cow_dec_chain", None)
    while dec is not None:
        chain.append(dec)
        dec = getattr(dec._cow_func, "_cow_dec_chain", None)
    return chain


class CowCompleterArg(object):
    """What argcomplete knows when asking for completions of an argument."""

    def __init__(
        self,
        prefix: Optional[str],
        action: Optional[Any],
        parser: Optional[ArgumentParser],
        parsed_args: Optional[Namespace],
    ) -> None:
        super(CowCompleterArg, self).__init__()
        self.prefix = prefix
        self.action = action
        self.parser = parser
        self.parsed_args = parsed_args


class CowArg(CowDecorator):
    def __init__(
        self,
        name: str,
        helpmsg: Optional[str] = None,
        short_name: Optional[str] = None,
        completercb: Optional[Callable[[CowCompleterArg], List[str]]] = None,
        **vargs: Any,
    ) -> None:
        super(CowArg, self).__init__()
        self.name = name
        self.helpmsg = helpmsg
        self.short_name = short_name
        self.completercb = completercb
        self.vargs = vargs

    def update(self, other: "CowArg") -> None:
        if other.helpmsg is not None:
            self.helpmsg = other.helpmsg
        if other.short_name:
            self.short_name = other.short_name
        if other.completercb is not None:
            self.completercb = other.completercb
        self.vargs.update(other.vargs)

    def addToArgParser(self, parser: ArgumentParser) -> None:
        pargs = ["--%s" % self.name]
        if self.short_name:
            pargs.append("-%s" % self.short_name)

        vargs = dict(self.vargs)
        if vargs.get("action") in ("store_true", "store_false"):
            vargs.pop("type", None)

        action = parser.add_argument(*pargs, help=self.helpmsg or "", **vargs)

        completercb = self.completercb
        if completercb is not None:

            def completer(**vargs: Any) -> List[str]:
                return completercb(
                    CowCompleterArg(
                        prefix=vargs.get("prefix"),
                        action=vargs.get("action"),
                        parser=vargs.get("parser"),
                        parsed_args=vargs.get("parsed_args"),
                    )
                )

            action.completer = completer  # type: ignore


class CowCmd(CowDecorator):
    """A command of the tree.

    Used as a decorator it names a function and sets its help message. Used
    on its own it is a group whose subcmds are other commands or functions.
    """

    def __init__(
        self,
        name: str = "",
        helpmsg: str = "",
        subcmds: Optional[List[Any]] = None,
    ) -> None:
        super(CowCmd, self).__init__()
        self.name = name
        self.helpmsg = helpmsg
        self.subcmds: List[Any] = subcmds or []


def _arg_type(annotation: Any) -> Any:
    """Plain type of an annotation, Optional[X] gives X."""
    if get_origin(annotation) is Union:
        candidates = [x for x in get_args(annotation) if x is not type(None)]
        if len(candidates) == 1:
            return candidates[0]
        return None
    return annotation


class CowCmdWrapper:
    """Uniform view over a CowCmd group or a (decorated) function."""

    def __init__(self, wrapped_content: Union[CowCmd, Callable[..., Any]]) -> None:
        if isinstance(wrapped_content, CowCmdWrapper):
            wrapped_content = wrapped_content._wrapped_content
        self._wrapped_content = wrapped_content

        if self.name is None:
            raise Exception("I failed to infer the name")

    def __str__(self) -> str:
        return f"<{self.name} {self.callback}>"

    def __repr__(self) -> str:
        return str(self)

    @property
    def cmd(self) -> Optional[CowCmd]:
        d = self._wrapped_content
        if isinstance(d, CowCmd):
            return d

        cmd = None
        for dec in decorator_chain(d):
            if isinstance(dec, CowCmd):
                cmd = dec
        return cmd

    @property
    def name(self) -> Optional[str]:
        cmd = self.cmd
        if cmd and cmd.name:
            return cmd.name

        d = self._wrapped_content
        if inspect.isfunction(d) or inspect.ismethod(d):
            return d.__name__

        return None

    @property
    def callback(self) -> Optional[Callable[..., Any]]:
        d = self._wrapped_content
        if isinstance(d, CowCmd):
            return None
        return d

    @property
    def subcmds(self) -> List["CowCmdWrapper"]:
        d = self._wrapped_content
        if isinstance(d, CowCmd):
            return [CowCmdWrapper(x) for x in d.subcmds]
        return []

    @property
    def helpmsg(self) -> str:
        cmd = self.cmd
        if cmd and cmd.helpmsg:
            return cmd.helpmsg

        description = self.description
        if description:
            return description.splitlines()[0]

        return ""

    @property
    def description(self) -> Optional[str]:
        d = self._wrapped_content
        if isinstance(d, CowCmd):
            return None

        docstring = inspect.getdoc(d)
        if not docstring:
            return None

        lines = []
        for line in docstring.splitlines():
            if line.startswith(":"):
                break
            lines.append(line)

        return "\n".join(lines).strip() or None

    @property
    def args(self) -> List[CowArg]:
        d = self._wrapped_content
        if isinstance(d, CowCmd):
            return []

        docs = dict(PARAM_DOC.findall(inspect.getdoc(d) or ""))

        params: Dict[str, CowArg] = {}
        for param_name, param in inspect.signature(d).parameters.items():
            if param.kind is not inspect.Parameter.POSITIONAL_OR_KEYWORD:
                continue

            arg = CowArg(name=param_name, helpmsg=docs.get(param_name, "").strip())

            if param.default is not inspect.Parameter.empty:
                arg.vargs["default"] = param.default
                arg.vargs["required"] = False
            else:
                arg.vargs["required"] = True

            _type = None
            if param.annotation is not inspect.Parameter.empty:
                _type = _arg_type(param.annotation)

            if _type is bool or isinstance(param.default, bool):
                arg.vargs["action"] = "store_false" if param.default else "store_true"
            elif get_origin(_type) is list:
                arg.vargs["action"] = "append"
                arg.vargs["type"] = get_args(_type)[0]
            elif _type in (str, int, float):
                arg.vargs["type"] = _type

            params[param_name] = arg

        # Decorators closer to the function are applied first.
        for dec in reversed(decorator_chain(d)):
            if isinstance(dec, CowArg):
                params.setdefault(dec.name, CowArg(name=dec.name)).update(dec)

        return list(params.values())


def argcomplete_args() -> List[str]:
    """Words of the command line being completed by the shell, if any."""
    comp_line = os.environ.get("COMP_LINE", None)
    if comp_line is None:
        return []

    comp_point = int(os.environ.get("COMP_POINT", len(comp_line)))
    _, _, _, comp_words, _ = argcomplete.split_line(comp_line, comp_point)
    return comp_words[1:]


def build_parser(cmd: CowCmdWrapper, parser: ArgumentParser) -> None:
    for arg in cmd.args:
        arg.addToArgParser(parser)

    subcmds = cmd.subcmds
    if not subcmds:
        return

    subparsers = parser.add_subparsers()
    for subcmd in subcmds:
        sub_parser = subparsers.add_parser(
            subcmd.name,
            help=subcmd.helpmsg,
            description=subcmd.description or subcmd.helpmsg,
            formatter_class=RawTextHelpFormatter,
        )
        sub_parser.set_defaults(cow_callback=subcmd.callback, cow_parser=sub_parser)
        build_parser(subcmd, sub_parser)


def cow_arg_parser(root: Any, args: Optional[List[str]] = None) -> Dict[str, Any]:
    """Parse the arguments against the command tree and run the command.

    :param root: The root CowCmd (or a single command function).
    :param args: Command line arguments, without the program name.
    :returns: A dict with "cmd", "value" and "argparse", the latter holding
        "help" or "error" text when no command could be run.
    """
    if args is None:
        args = argcomplete_args()

    base_cmd = CowCmdWrapper(root)
    root_parser = ArgumentParser(
        prog=base_cmd.name,
        description=base_cmd.description or base_cmd.helpmsg,
        formatter_class=RawTextHelpFormatter,
    )
    build_parser(base_cmd, root_parser)

    argcomplete.autocomplete(root_parser)

    ret: Dict[str, Any] = {"argparse": {}, "cmd": base_cmd, "value": None}

    nm = Namespace(cow_callback=base_cmd.callback, cow_parser=root_parser)
    out = StringIO()
    err = StringIO()
    try:
        with redirect_stdout(out), redirect_stderr(err):
            nm = root_parser.parse_args(args, namespace=nm)
    except SystemExit:
        if err.getvalue():
            ret["argparse"]["error"] = err.getvalue()
        else:
            ret["argparse"]["help"] = out.getvalue()
        return ret

    nm_dict: Dict[str, Any] = vars(nm)
    callback = nm_dict.pop("cow_callback")
    parser = nm_dict.pop("cow_parser")

    # Reached a group, there is nothing to run.
    if callback is None:
        ret["argparse"]["help"] = parser.format_help()
        return ret

    ret["cmd"] = CowCmdWrapper(callback)
    try:
        ret["value"] = callback(**nm_dict)
    except Exception as e:
        logger.debug("Command %s failed", ret["cmd"].name, exc_info=True)
        ret["argparse"]["error"] = "%s\n" % e

    return ret
