# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import pytest

from ttyinput import keys
from ttyinput.scripts import encode_cli, parse_key


@pytest.mark.parametrize(
    "name,expected",
    (
        ("a", keys.Char("a")),
        ("up", keys.Up()),
        ("Page_Down", keys.PageDown()),
        ("f12", keys.Function(12)),
        ("enter", keys.Enter()),
    ),
)
def test_parse_key(name, expected):
    assert parse_key(name) == expected


def test_parse_unknown_key():
    with pytest.raises(ValueError):
        parse_key("hyper")


def test_encode_cli(capsys):
    assert encode_cli(["up", "--mode", "application"]) == 0
    assert capsys.readouterr().out == "b'\\x1bOA'\n"
    assert encode_cli(["a", "--ctrl", "--alt"]) == 0
    assert capsys.readouterr().out == "b'\\x1b\\x01'\n"
    assert encode_cli(["down", "--release"]) == 0
    assert capsys.readouterr().out == "(no encoding)\n"


def test_encode_cli_unimplemented(capsys):
    assert encode_cli(["f1"]) == 1
    assert "Function" in capsys.readouterr().err
