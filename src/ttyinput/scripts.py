# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import re
import sys

from . import keys
from .commontypes import TtyInputError
from .encoding import encode
from .keys import InputMode, Modifiers

NAMED_KEYS = {
    "up": keys.Up,
    "down": keys.Down,
    "left": keys.Left,
    "right": keys.Right,
    "shift_left": keys.ShiftLeft,
    "shift_right": keys.ShiftRight,
    "ctrl_left": keys.CtrlLeft,
    "ctrl_right": keys.CtrlRight,
    "alt_left": keys.AltLeft,
    "alt_right": keys.AltRight,
    "meta_left": keys.MetaLeft,
    "meta_right": keys.MetaRight,
    "page_up": keys.PageUp,
    "page_down": keys.PageDown,
    "home": keys.Home,
    "end": keys.End,
    "insert": keys.Insert,
    "delete": keys.Delete,
    "caps_lock": keys.CapsLock,
    "num_lock": keys.NumLock,
    "scroll_lock": keys.ScrollLock,
    "enter": keys.Enter,
}

FUNCTION_KEY_NAME = re.compile(r"f(\d+)")


def parse_key(name: str, press: bool = True) -> keys.Key:
    if len(name) == 1:
        return keys.Char(name, press=press)
    lowered = name.lower()
    if lowered in NAMED_KEYS:
        return NAMED_KEYS[lowered](press=press)
    if match := FUNCTION_KEY_NAME.fullmatch(lowered):
        return keys.Function(int(match.group(1)), press=press)
    raise ValueError(f"Unknown key {name!r}")


encode_parser = argparse.ArgumentParser(description="Show the bytes a key sends to the controlling process.")
encode_parser.add_argument("key", help="a single character, or a key name such as up, page_down, enter or f5")
encode_parser.add_argument("--mode", choices=[mode.value for mode in InputMode], default=InputMode.ANSI.value)
encode_parser.add_argument("--release", action="store_true")
encode_parser.add_argument("--shift", action="store_true")
encode_parser.add_argument("--caps", action="store_true")
encode_parser.add_argument("--ctrl", action="store_true")
encode_parser.add_argument("--alt", action="store_true")
encode_parser.add_argument("--verbose", action="store_true")


def encode_cli(argv=None):
    args = encode_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        key = parse_key(args.key, press=not args.release)
    except ValueError as e:
        encode_parser.error(str(e))
    modifiers = Modifiers(shift=args.shift, caps=args.caps, ctrl=args.ctrl, alt=args.alt)
    try:
        code = encode(key, InputMode(args.mode), modifiers)
    except TtyInputError as e:
        print(e, file=sys.stderr)
        return 1
    if code is None:
        print("(no encoding)")
    else:
        print(repr(code))
    return 0


def main():
    sys.exit(encode_cli())
