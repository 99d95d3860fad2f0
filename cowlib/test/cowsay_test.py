import dataclasses

import pytest

from cowlib.cowconfig import COW_BUNDLED
from cowlib.cowerror import TemplateRenderError
from cowlib.cowfile import load_cow
from cowlib.cowmodel import CowAction, CowConfig
from cowlib.cowsay import Cowsay, render_cow

PERL_COW = """\
##
## The default cow
##
$the_cow = <<"EOC";
        $thoughts   ^__^
         $thoughts  ($eyes)\\\\_______
            (__)\\\\       )\\\\/\\\\
             $tongue ||----w |
                ||     ||
EOC
"""


def test_cowsay_default() -> None:
    # GIVEN.
    ref = """\
 _____________
< Hello world >
 -------------
        \\   ^__^
         \\  (oo)\\_______
            (__)\\       )\\/\\
                ||----w |
                ||     ||"""

    # WHEN.
    ret = Cowsay().set_template(PERL_COW).set_text("Hello world").render_cow()

    # THEN
    assert ret == ref


def test_cowsay_bundled_default_cow() -> None:
    # GIVEN.
    ref = Cowsay().set_template(PERL_COW).set_text("foo").render_cow()

    # WHEN.
    template = load_cow("default", [COW_BUNDLED])
    ret = Cowsay().set_template(template).set_text("foo").render_cow()

    # THEN
    assert ret == ref


def test_cowthink_options() -> None:
    # GIVEN.
    ref = """\
 ________
( Hello  )
( world! )
 --------
        o   ^__^
         o  (^^)\\_______
            (__)\\       )\\/\\
             U  ||----w |
                ||     ||"""

    # WHEN.
    ret = (
        Cowsay()
        .set_template(PERL_COW)
        .set_eyes("^^")
        .set_tongue("U")
        .set_action("think")
        .set_text("Hello\nworld!")
        .render_cow()
    )

    # THEN
    assert ret == ref


def test_cowsay_plain_template() -> None:
    # GIVEN.
    template = "# a comment\n$thoughts\n  $eyes $tongue\n"

    # WHEN.
    ret = (
        Cowsay()
        .set_template(template)
        .set_eyes("xx")
        .set_tongue("U")
        .set_text("hi")
        .render_cow()
    )

    # THEN
    assert ret == " ____\n< hi >\n ----\n\n\\\n  xx U"


def test_cowsay_empty_text_and_template() -> None:
    assert Cowsay().render_cow() == " __\n<  >\n --"


def test_setters_chain_and_last_write_wins() -> None:
    # GIVEN.
    cowsay = Cowsay()

    # WHEN.
    ret = cowsay.set_eyes("xx").set_eyes("**")

    # THEN
    assert ret is cowsay
    assert cowsay.config.eyes == "**"


def test_render_snapshot_is_immutable() -> None:
    # GIVEN.
    cowsay = Cowsay().set_text("first")
    config = cowsay.config

    # WHEN.
    cowsay.set_text("second")

    # THEN
    assert config.text == "first"
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.text = "third"  # type: ignore


def test_render_is_deterministic() -> None:
    # GIVEN.
    config = CowConfig(template=PERL_COW, action=CowAction.THINK, text="a " * 50)

    # WHEN.
    first = render_cow(config)
    second = render_cow(config)

    # THEN
    assert first == second


def test_render_error_propagates() -> None:
    # GIVEN.
    cowsay = Cowsay().set_template("($eyes)").set_eyes(None)  # type: ignore

    # THEN
    with pytest.raises(TemplateRenderError):
        cowsay.render_cow()


def test_render_keeps_trailing_unicode_spaces() -> None:
    # GIVEN.
    cowsay = Cowsay().set_template("x\u00a0 \n\t\0").set_text("hi")

    # WHEN.
    ret = cowsay.render_cow()

    # THEN
    assert ret == " ____\n< hi >\n ----\nx\u00a0"
