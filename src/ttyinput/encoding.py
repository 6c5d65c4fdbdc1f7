# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Turn logical keys into the bytes a controlling process reads from its tty.

These are plain functions: everything they depend on (the key, the input mode, the
modifiers currently held) is passed in, and nothing is written anywhere. A result of
None means the key produces no input at all, which is normal for releases and for
ctrl combinations that have no control character.
"""

from __future__ import annotations

import typing

from .commontypes import EncodingNotImplemented, ModifierKeyError
from .keys import (
    AltLeft,
    AltRight,
    CapsLock,
    Char,
    Cmd,
    CtrlLeft,
    CtrlRight,
    Delete,
    Down,
    End,
    Enter,
    Function,
    Home,
    InputMode,
    Insert,
    Left,
    MetaLeft,
    MetaRight,
    Modifiers,
    NumLock,
    PageDown,
    PageUp,
    Right,
    ScrollLock,
    ShiftLeft,
    ShiftRight,
    Up,
)

if typing.TYPE_CHECKING:
    from .keys import Key

ESC = "\x1b"

# The xterm modifier parameter, keyed on (shift or caps, ctrl, alt).
MODIFIER_PARAMETERS = {
    (True, False, False): 2,
    (False, False, True): 3,
    (True, False, True): 4,
    (False, True, False): 5,
    (True, True, False): 6,
    (False, True, True): 7,
    (True, True, True): 8,
}

UNMODIFIED = (False, False, False)


def encode(key: Key, mode: InputMode, modifiers: Modifiers) -> typing.Optional[bytes]:
    match mode:
        case InputMode.ANSI:
            code = compatible_code(key, modifiers, ansi=True)
        case InputMode.APPLICATION:
            code = compatible_code(key, modifiers, ansi=False)
        case InputMode.EXTENDED:
            code = extended_code(key, modifiers)
        case _:
            raise ValueError(f"Unknown input mode {mode!r}")
    if code is None:
        return None
    return code.encode("utf-8")


def compatible_code(key: Key, modifiers: Modifiers, ansi: bool) -> typing.Optional[str]:
    "The VT100/xterm-compatible tables shared by the ANSI and application modes."
    match key:
        case Char(press=True, char=c):
            return char_code(modifiers, c)
        case Cmd(text=text):
            return text
        case Up(press=True):
            return cursor_code(modifiers, "A", ansi)
        case Down(press=True):
            return cursor_code(modifiers, "B", ansi)
        case Left(press=True):
            return cursor_code(modifiers, "D", ansi)
        case Right(press=True):
            return cursor_code(modifiers, "C", ansi)
        case ShiftLeft() | ShiftRight() | CtrlLeft() | CtrlRight() | AltLeft() | AltRight() | CapsLock():
            raise ModifierKeyError(key)
        case MetaLeft(press=True) | MetaRight(press=True):
            return None
        case PageUp(press=True):
            return tilde_code(modifiers, "5")
        case PageDown(press=True):
            return tilde_code(modifiers, "6")
        # Home and End ignore application mode.
        case Home(press=True):
            return cursor_code(modifiers, "H", True)
        case End(press=True):
            return cursor_code(modifiers, "F", True)
        case Insert(press=True):
            return tilde_code(modifiers, "2")
        case Delete(press=True):
            return tilde_code(modifiers, "3")
        case NumLock() | ScrollLock() | Function():
            raise EncodingNotImplemented(f"No compatible encoding defined for {key!r}")
        case Enter(press=True):
            return ESC + "\r" if modifiers.alt else "\r"
        case _:
            return None


def extended_code(key: Key, modifiers: Modifiers) -> typing.Optional[str]:
    raise EncodingNotImplemented("The extended input mode has no encoding table yet")


def control_char(c: str) -> typing.Optional[str]:
    "Map @, A-Z, [, \\, ], ^, _ and their lowercase/DEL neighbours onto C0 control codes."
    point = ord(c)
    if 0x40 <= point <= 0x7F:
        return chr(point & 0b00011111)
    return None


def char_code(modifiers: Modifiers, c: str) -> typing.Optional[str]:
    match (modifiers.ctrl, modifiers.alt):
        case (False, False):
            return c
        case (True, False):
            return control_char(c)
        case (False, True):
            return ESC + c
        case (True, True):
            control = control_char(c)
            if control is None:
                return None
            return ESC + control


def cursor_code(modifiers: Modifiers, terminator: str, ansi: bool) -> str:
    triplet = modifiers.triplet
    if triplet == UNMODIFIED:
        if ansi:
            return f"{ESC}[{terminator}"
        return f"{ESC}O{terminator}"
    return f"{ESC}[1;{MODIFIER_PARAMETERS[triplet]}{terminator}"


def tilde_code(modifiers: Modifiers, init: str) -> str:
    triplet = modifiers.triplet
    if triplet == UNMODIFIED:
        return f"{ESC}[{init}~"
    return f"{ESC}[{init};{MODIFIER_PARAMETERS[triplet]}~"
